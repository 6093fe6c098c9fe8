from .core import (LevinsonDurbinRecursion, LevinsonDurbinBuffer,
                   ReverseLevinsonDurbinRecursion, ReverseLevinsonDurbinBuffer,
                   Matrix, SingularNormalMatrixError, UnstableLpcError)

__version__ = '0.1.0'
