from sdl_decompose.logger import get_logger

__version__ = "0.1.0"

log = get_logger("sdl_decompose")

from sdl_decompose.decomposer import DecompositionError, decompose  # noqa: E402
from sdl_decompose.models import DecompositionOptions, DecompositionResult, OperationKind  # noqa: E402

__all__ = [
    "DecompositionError",
    "DecompositionOptions",
    "DecompositionResult",
    "OperationKind",
    "__version__",
    "decompose",
    "log",
]
