"""Derivation of configuration scopes from fully-qualified type names."""

CLASSES_PREFIX = "classes"


def type_name_of(cls: type) -> str:
    """Fully-qualified name of a class, e.g. `billing.service.InvoiceService`."""
    return f"{cls.__module__}.{cls.__qualname__}"


def resolve_scopes(type_name: str) -> list[str]:
    """Map a fully-qualified type name to its configuration scopes.

    Scopes are cumulative prefixes of the name under the `classes` root,
    ordered from the most general to the most specific:

        >>> resolve_scopes("com.foo.Bar")
        ['classes.com', 'classes.com.foo', 'classes.com.foo.Bar']

    The order matters: later scopes override earlier ones when merged.
    """
    scopes: list[str] = []
    current = CLASSES_PREFIX
    for part in type_name.split("."):
        current = f"{current}.{part}"
        scopes.append(current)
    return scopes
