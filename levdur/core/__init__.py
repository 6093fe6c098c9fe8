from .errors import (LevinsonDurbinError, SingularNormalMatrixError, UnstableFilterError,
                     UnstableLpcError, StreamError, DimensionMismatchError)
from .matrix import Matrix
from .input_source import (InputSourceInterface, InputSourceFromArray, InputSourceFromStream,
                           InputSourcePreprocessingForFilterGain, FilterGainType)
from .levinson import (LevinsonDurbinBuffer, LevinsonDurbinRecursion,
                       ReverseLevinsonDurbinBuffer, ReverseLevinsonDurbinRecursion,
                       solve_normal_equations)
