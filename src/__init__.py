"""User Directory Page Package."""

__version__ = "1.0.0"
__description__ = (
    "Server-rendered, paginated user directory page served from AWS Lambda"
)

__all__ = ["handlers", "core"]
