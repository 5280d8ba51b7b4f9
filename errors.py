from __future__ import annotations


class SVGGraphicsError(Exception):
    pass


class InvalidInputError(SVGGraphicsError):
    pass


class MalformedAttributeError(SVGGraphicsError):
    # the owning tag is kept on the exception, diagnostics prefix it themselves
    def __init__(self, attr_name: str, value: str = None, tag: str = None):
        self.attr_name = attr_name
        self.value = value
        self.tag = tag
        if value is None:
            message = f"missing required attribute '{attr_name}'"
        else:
            message = f"invalid {attr_name} value: {value!r}"
        super().__init__(message)
