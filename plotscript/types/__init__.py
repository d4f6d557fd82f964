from plotscript.types.atom import Atom, AtomKind
from plotscript.types.expression import Expression, ExpressionKind
from plotscript.types.interrupt import Interrupt
from plotscript.types.environment import Environment

__all__ = [
    "Atom",
    "AtomKind",
    "Expression",
    "ExpressionKind",
    "Interrupt",
    "Environment",
]
