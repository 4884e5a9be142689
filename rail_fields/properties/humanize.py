import re

# Word boundaries inside camelCase names: "firstName", "URLField" and "file2Path"
# split, acronyms such as "ID" stay together.
_CAMEL_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_SEPARATOR_RE = re.compile(r"[_\s]+")


def humanize(name: str) -> str:
    """
    Turn a property name into a readable label.

    ``"firstName"`` -> ``"First name"``, ``"is_active"`` -> ``"Is active"``,
    ``"ID"`` -> ``"Id"``.
    """
    spaced = _SEPARATOR_RE.sub(" ", _CAMEL_BOUNDARY_RE.sub("_", name)).strip()
    lowered = spaced.lower()
    return lowered[:1].upper() + lowered[1:]
