from minilisp.types.nil import Nil, NilType, T
from minilisp.types.environment import Environment
from minilisp.types.closure import Closure

__all__ = ["Nil", "NilType", "T", "Environment", "Closure"]
