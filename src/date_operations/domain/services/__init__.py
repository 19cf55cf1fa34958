"""Calendar rules used by the domain value objects."""
