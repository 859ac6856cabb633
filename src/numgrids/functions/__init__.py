from .grid_function import GridFunction, jacobian, physical_gradient

__all__ = [
    "GridFunction",
    "jacobian",
    "physical_gradient",
]
