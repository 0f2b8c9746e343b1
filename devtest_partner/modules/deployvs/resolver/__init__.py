from .path_resolver import (
    PathResolver,
    expand_parameter,
    expand_parameters,
    expand_wildcards,
    is_remote_reference,
    split_mar_paths,
)

__all__ = [
    "PathResolver",
    "expand_parameter",
    "expand_parameters",
    "expand_wildcards",
    "is_remote_reference",
    "split_mar_paths",
]
