from .levinson_durbin import LevinsonDurbinBuffer, LevinsonDurbinRecursion
from .reverse_levinson_durbin import ReverseLevinsonDurbinBuffer, ReverseLevinsonDurbinRecursion
from .utils import solve_normal_equations, is_stable

__all__ = ['LevinsonDurbinBuffer', 'LevinsonDurbinRecursion',
           'ReverseLevinsonDurbinBuffer', 'ReverseLevinsonDurbinRecursion',
           'solve_normal_equations', 'is_stable']
