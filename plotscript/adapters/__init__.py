from plotscript.adapters.normalize import coerce_scalar, iter_scalars

__all__ = ["coerce_scalar", "iter_scalars"]
