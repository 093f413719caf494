"""Domain layer: content/resource enums and exceptions. No infrastructure imports."""
