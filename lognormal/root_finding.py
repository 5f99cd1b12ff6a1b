# Bracketing root search on monotone functions

# IMPORT MODULES
import logging
from typing import Callable, NamedTuple

logger = logging.getLogger(__name__)


class Bisection(NamedTuple):
    """
    Outcome of bisection().

    root        :   last midpoint evaluated
    error       :   |function(root) - target|
    iterations  :   number of function evaluations
    converged   :   error <= tolerance was reached
    """
    root: float
    error: float
    iterations: int
    converged: bool


def bisection(function:Callable[[float], float], target:float, low:float, high:float,
              tolerance:float = 1e-7, max_iterations:int = 70) -> Bisection:
    """
    Find t in [low, high] such that function(t) is within tolerance of target, for a non-decreasing function.

    Each step evaluates the midpoint; if function(mid) > target the upper end moves to mid, otherwise
    (ties included) the lower end does. The search stops at the first midpoint meeting the tolerance.

    :param function: Non-decreasing function of one real variable.
    :type function: callable
    :param target: The value function should reach.
    :type target: float
    :param low: Lower end of the bracket.
    :type low: float
    :param high: Upper end of the bracket.
    :type high: float
    :param tolerance: Absolute tolerance on |function(t) - target|.
    :type tolerance: float, optional, defaults to 1e-7
    :param max_iterations: Maximum number of function evaluations.
    :type max_iterations: int, optional, defaults to 70

    :raises ValueError: If low >= high, tolerance <= 0 or max_iterations < 1.

    :return: The last midpoint together with its error, the iteration count and a convergence flag.
    :rtype: Bisection
    """
    check_bracket(low, high, tolerance, max_iterations)
    mid, error = low, float('inf')
    for i in range(1, max_iterations + 1):
        mid = (low + high) / 2
        value = function(mid)
        error = abs(value - target)
        logger.debug(f'bisection i:{i} low:{low:.6g} high:{high:.6g} mid:{mid:.10g} f(mid):{value:.10g} error:{error:.3g}')
        if value > target: # new boundary selection
            high = mid
        else:
            low = mid
        if error <= tolerance:
            return Bisection(root=mid, error=error, iterations=i, converged=True)
    return Bisection(root=mid, error=error, iterations=max_iterations, converged=False)


def check_bracket(low:float, high:float, tolerance:float, max_iterations:int):
    """
    Validate a bisection configuration.

    :raises ValueError: If the configuration cannot define a search.
    """
    if not low < high:
        raise ValueError(f'lower bound must be below upper bound, got [{low}, {high}]')
    if not tolerance > 0:
        raise ValueError(f'tolerance must be positive, got {tolerance}')
    if int(max_iterations) != max_iterations or max_iterations < 1:
        raise ValueError(f'max_iterations must be a positive integer, got {max_iterations}')
