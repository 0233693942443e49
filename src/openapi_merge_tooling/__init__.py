"""openapi_merge_tooling: merge a directory of OpenAPI specs into one $ref-based composite spec."""

__version__ = "0.1.0"
