"""Name matching shared by the strategy enumerations."""


def canonical(name: str) -> str:
    """Lower-case ``name`` and drop underscores, dashes and spaces."""
    return name.lower().replace("_", "").replace("-", "").replace(" ", "")
