"""
Unit tests for exceptions module of the FAO-56 reference ET library.

Tests custom exception hierarchy and utilities.
"""

import pytest
import numpy as np
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))


class TestEToError:
    """Test base exception."""

    def test_error_creation(self):
        from fao_eto.utils.exceptions import EToError

        error = EToError("Test error message")

        assert str(error) == "Test error message"
        assert error.message == "Test error message"

    def test_error_with_details(self):
        from fao_eto.utils.exceptions import EToError

        error = EToError("Test error", details={"key": "value"})

        assert error.details["key"] == "value"
        assert "value" in str(error)

    def test_error_add_detail(self):
        from fao_eto.utils.exceptions import EToError

        error = EToError("Test error")
        error.add_detail("formula", "et_rad")

        assert error.details["formula"] == "et_rad"


class TestInputRangeError:
    """Test InputRangeError."""

    def test_details(self):
        from fao_eto.utils.exceptions import InputRangeError

        error = InputRangeError("bad latitude", parameter="latitude", value=2.0, bounds=(-1.57, 1.57))

        assert error.details == {"parameter": "latitude", "bounds": (-1.57, 1.57), "value": 2.0}
        assert str(error) == "bad latitude"


class TestDomainError:
    """Test DomainError and the math error decorator."""

    def test_domain_error_details(self):
        from fao_eto.utils.exceptions import DomainError

        error = DomainError("sqrt of negative", formula="hargreaves", arguments={"tmin": 20})

        assert error.details["step"] == "hargreaves"
        assert error.details["arguments"] == {"tmin": 20}

    def test_decorator_converts_numpy_errors(self):
        from fao_eto.utils.exceptions import DomainError, handle_math_errors

        @handle_math_errors
        def log_of(x):
            return np.log(x)

        with pytest.raises(DomainError):
            log_of(0.0)
        with pytest.raises(DomainError):
            log_of(-1.0)

    def test_decorator_converts_zero_division(self):
        from fao_eto.utils.exceptions import DomainError, handle_math_errors

        @handle_math_errors
        def ratio(a, b):
            return a / b

        with pytest.raises(DomainError) as excinfo:
            ratio(1.0, b=0.0)

        assert excinfo.value.details["arguments"] == {"arg0": 1.0, "b": 0.0}
        assert isinstance(excinfo.value.__cause__, ZeroDivisionError)

    def test_decorator_rejects_non_finite_result(self):
        from fao_eto.utils.exceptions import DomainError, handle_math_errors

        @handle_math_errors
        def passthrough(x):
            return x

        with pytest.raises(DomainError):
            passthrough(float("nan"))
        with pytest.raises(DomainError):
            passthrough(float("inf"))
        assert passthrough(1.5) == 1.5

    def test_decorator_returns_plain_float(self):
        from fao_eto.utils.exceptions import handle_math_errors
        from fao_eto.et import hargreaves
        from fao_eto.radiation import sol_dec

        @handle_math_errors
        def square_root(x):
            return np.sqrt(x)

        assert type(square_root(4.0)) is float
        assert type(hargreaves(12, 26, 19, 18.8)) is float
        assert type(sol_dec(246)) is float
        assert repr(square_root(4.0)) == "2.0"

    def test_decorator_rejects_result_beyond_float(self):
        from fao_eto.utils.exceptions import DomainError, handle_math_errors

        @handle_math_errors
        def power_of_ten(n):
            return 10 ** n

        with pytest.raises(DomainError):
            power_of_ten(400)
        assert power_of_ten(2) == 100.0

    def test_decorator_keeps_library_errors(self):
        from fao_eto.utils.exceptions import InputRangeError, handle_math_errors

        @handle_math_errors
        def failing():
            raise InputRangeError("out of range", parameter="x", value=1)

        with pytest.raises(InputRangeError):
            failing()

    def test_decorator_preserves_name(self):
        from fao_eto.et import hargreaves
        assert hargreaves.__name__ == "hargreaves"


class TestErrorHandlingUtilities:
    """Test error handling utilities."""

    def test_create_error_context(self):
        from fao_eto.utils.exceptions import EToError, create_error_context

        error = EToError("Test error", details={"code": 123})
        context = create_error_context(error, {"record": 17})

        assert context["error_type"] == "EToError"
        assert context["error_details"]["code"] == 123
        assert context["additional_context"]["record"] == 17


class TestExceptionHierarchy:
    """Test exception hierarchy."""

    def test_exception_inheritance(self):
        from fao_eto.utils.exceptions import (
            EToError,
            InputRangeError,
            PsychrometerTypeError,
            ComputationError,
            DomainError,
            ConfigurationError
        )

        assert issubclass(InputRangeError, EToError)
        assert issubclass(InputRangeError, ValueError)
        assert issubclass(PsychrometerTypeError, ValueError)
        assert issubclass(DomainError, ComputationError)
        assert issubclass(DomainError, ArithmeticError)
        assert issubclass(ConfigurationError, EToError)

    def test_exception_catching(self):
        from fao_eto.utils.exceptions import EToError, DomainError

        try:
            raise DomainError("Test")
        except EToError as e:
            assert isinstance(e, DomainError)
            assert str(e) == "Test"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
