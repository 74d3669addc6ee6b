"""Default calculator bootstrap (import side-effect)."""
from .api import set_calculator
from .core.calculator import make_calculator

set_calculator(make_calculator())
