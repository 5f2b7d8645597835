from repogen._internal.descriptors import (
    LifecycleMethodDescriptor,
    LifecycleOperation,
    ParameterKind,
)
from repogen._internal.lifecycle.call_shapes import CallShape, resolve_call_shape
from repogen._internal.lifecycle.exception_translation import ExceptionMapping, exception_mappings
from repogen._internal.lifecycle.method import LifecycleMethod
from repogen._internal.lifecycle.renderer import LifecycleMethodRenderer, Section
from repogen._internal.naming import ImportContext
from repogen._internal.protocols import (
    DeclarationHostProtocol,
    GeneratedMethodProtocol,
    MetaAttributeProtocol,
    NameResolverProtocol,
    require_meta_attribute,
)
from repogen.exceptions import (
    RepogenError,
    RepogenInvalidDescriptorError,
    RepogenInvalidTypeNameError,
    RepogenTemplateError,
    RepogenUnsupportedOperationError,
)
from repogen.sessions import ExecutionStyle
from repogen.settings import RepogenSettings, get_settings

__all__ = [
    "CallShape",
    "DeclarationHostProtocol",
    "ExceptionMapping",
    "ExecutionStyle",
    "GeneratedMethodProtocol",
    "ImportContext",
    "LifecycleMethod",
    "LifecycleMethodDescriptor",
    "LifecycleMethodRenderer",
    "LifecycleOperation",
    "MetaAttributeProtocol",
    "NameResolverProtocol",
    "ParameterKind",
    "RepogenError",
    "RepogenInvalidDescriptorError",
    "RepogenInvalidTypeNameError",
    "RepogenSettings",
    "RepogenTemplateError",
    "RepogenUnsupportedOperationError",
    "Section",
    "exception_mappings",
    "get_settings",
    "require_meta_attribute",
    "resolve_call_shape",
]
