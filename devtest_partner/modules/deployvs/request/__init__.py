from .builder import LineSink, RequestBuilder

__all__ = ["LineSink", "RequestBuilder"]
