"""stressgen: populate arbitrary objects with generated values for stress tests."""

__version__ = "1.0.0"

from stressgen.application.discovery import extract_available_properties  # noqa: E402
from stressgen.application.registry import PropertySetterRegistry  # noqa: E402
from stressgen.container import Container, create_container  # noqa: E402
from stressgen.infrastructure.generators import (  # noqa: E402
    ConstantValueGenerator,
    FunctionValueGenerator,
    RandomValueGenerators,
)
from stressgen.infrastructure.reflection import ClassReflectionAccessWrapper  # noqa: E402

__all__ = [
    "ClassReflectionAccessWrapper",
    "ConstantValueGenerator",
    "Container",
    "FunctionValueGenerator",
    "PropertySetterRegistry",
    "RandomValueGenerators",
    "__version__",
    "create_container",
    "extract_available_properties",
]
