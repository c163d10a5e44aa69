"""
either_commons – a two-channel Either type with functional combinators.

Import path convention::

    from either_commons import Either, left, right
    from either_commons.kernel.errors import InvalidStateError, NullArgumentError
    from either_commons.config import EnvSettingsLoader, EitherSettings
"""

from either_commons.kernel.types import Either, Left, Right, left, right

__version__ = "0.1.0"
__all__ = ["Either", "Left", "Right", "__version__", "left", "right"]
