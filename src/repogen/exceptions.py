class RepogenError(Exception):
    """Represent a base class for all repogen-specific failures.

    Catch this type when you want to handle any repogen error path without
    matching each concrete exception class individually.
    """


class RepogenInvalidDescriptorError(RepogenError, ValueError):
    """Signal a lifecycle method descriptor that cannot be rendered.

    Raised by ``LifecycleMethodDescriptor`` construction and by the call-shape
    resolver when the descriptor breaks a generation precondition, for example
    an identifier that is not a valid Java name, an unknown operation, or a
    ``java.util.List`` parameter combined with ``upsert`` (the session API has
    no bulk upsert for lists).

    Typical fixes include correcting the repository method signature that the
    descriptor was built from, or declaring the parameter as a single entity
    or an array.
    """


class RepogenUnsupportedOperationError(RepogenError):
    """Signal a metamodel query that a member kind does not support.

    Raised by ``require_meta_attribute`` when a declaration host asks a
    lifecycle method for attribute-name or meta-type text. Those queries are
    only meaningful for field-backed attributes.
    """


class RepogenTemplateError(RepogenError, ValueError):
    """Signal a malformed code fragment template.

    Raised while compiling or rendering the internal Java fragments. This is
    always a programming error in the fragment definitions, never a result of
    user input.
    """


class RepogenInvalidTypeNameError(RepogenError, ValueError):
    """Signal a Java type name that the import context cannot parse.

    Raised by ``ImportContext.import_type`` for unbalanced generic brackets
    or empty type arguments, such as ``java.util.Map<String,>``.
    """
