from __future__ import annotations


class CurveViewError(Exception):
    pass


class PointDataError(CurveViewError, ValueError):
    pass


class ViewerConfigError(CurveViewError, ValueError):
    pass
