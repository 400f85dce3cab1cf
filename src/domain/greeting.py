GREETING = "Hello, and sorry for this very boring and uninspiring Spring Boot app"


def greeting() -> str:
    """Return the fixed greeting served on the root path."""
    return GREETING
