"""Tests for the LP solver adapter."""

from unittest.mock import patch

import numpy as np
import pytest
from scipy.optimize import Bounds, LinearConstraint, OptimizeResult

from dividend_allocator.config import SolverConfig
from dividend_allocator.exceptions import (
    InfeasibleError,
    SolverError,
    SolverFailureError,
    UnboundedError,
)
from dividend_allocator.loaders import load_reference_securities
from dividend_allocator.optimizers import LinearProgramStrategy
from dividend_allocator.solver import (
    LinearProgram,
    LpResult,
    LpStatus,
    solve_linear_program,
)


def make_program() -> LinearProgram:
    # maximize x + y  s.t.  x + 2y <= 4,  3x + y <= 6,  x, y >= 0
    return LinearProgram(
        objective=np.array([1.0, 1.0]),
        constraints=[
            LinearConstraint(np.array([[1.0, 2.0], [3.0, 1.0]]), -np.inf, [4.0, 6.0]),
        ],
        bounds=Bounds(0, np.inf),
        maximize=True,
    )


def fake_result(status: int, message: str, x=None, fun=None) -> OptimizeResult:
    return OptimizeResult(
        status=status, success=status == 0, message=message, x=x, fun=fun
    )


class TestSolveLinearProgram:
    def test_optimal_solution(self):
        result = solve_linear_program(make_program())

        assert result.status is LpStatus.OPTIMAL
        assert result.is_optimal
        assert result.objective_value == pytest.approx(2.8, rel=1e-6)
        assert result.x[0] == pytest.approx(1.6, rel=1e-6)
        assert result.x[1] == pytest.approx(1.2, rel=1e-6)

    def test_minimization(self):
        # minimize x + y  s.t.  x + y >= 3
        program = LinearProgram(
            objective=np.array([1.0, 1.0]),
            constraints=[LinearConstraint(np.array([[1.0, 1.0]]), 3.0, np.inf)],
        )
        result = solve_linear_program(program)

        assert result.objective_value == pytest.approx(3.0, rel=1e-6)

    def test_infeasible(self):
        # x >= 0 but x <= -1
        program = LinearProgram(
            objective=np.array([1.0]),
            constraints=[LinearConstraint(np.array([[1.0]]), -np.inf, -1.0)],
            bounds=Bounds(0, np.inf),
            maximize=True,
        )
        result = solve_linear_program(program)

        assert result.status is LpStatus.INFEASIBLE
        assert result.x is None
        with pytest.raises(InfeasibleError):
            result.solution()

    def test_time_limit_forwarded(self):
        config = SolverConfig(TIME_LIMIT_S=5.0, PRESOLVE=False)
        with patch(
            "dividend_allocator.solver.milp",
            return_value=fake_result(0, "ok", x=np.array([1.6, 1.2]), fun=-2.8),
        ) as mock_milp:
            solve_linear_program(make_program(), config)

        options = mock_milp.call_args.kwargs["options"]
        assert options["time_limit"] == 5.0
        assert options["presolve"] is False

    def test_no_time_limit_by_default(self):
        with patch(
            "dividend_allocator.solver.milp",
            return_value=fake_result(0, "ok", x=np.array([1.6, 1.2]), fun=-2.8),
        ) as mock_milp:
            solve_linear_program(make_program())

        assert "time_limit" not in mock_milp.call_args.kwargs["options"]

    def test_objective_negated_for_maximize(self):
        with patch(
            "dividend_allocator.solver.milp",
            return_value=fake_result(0, "ok", x=np.array([1.6, 1.2]), fun=-2.8),
        ) as mock_milp:
            result = solve_linear_program(make_program())

        assert np.allclose(mock_milp.call_args.kwargs["c"], [-1.0, -1.0])
        assert result.objective_value == pytest.approx(2.8)


class TestStatusMapping:
    @pytest.mark.parametrize(
        "code,status,error",
        [
            (1, LpStatus.SOLVER_FAILURE, SolverFailureError),
            (2, LpStatus.INFEASIBLE, InfeasibleError),
            (3, LpStatus.UNBOUNDED, UnboundedError),
            (4, LpStatus.SOLVER_FAILURE, SolverFailureError),
        ],
    )
    def test_status_codes(self, code, status, error):
        with patch(
            "dividend_allocator.solver.milp",
            return_value=fake_result(code, "solver said no"),
        ):
            result = solve_linear_program(make_program())

        assert result.status is status
        assert result.x is None
        assert result.objective_value is None
        with pytest.raises(error, match="solver said no"):
            result.raise_for_status()

    def test_success_without_solution_is_failure(self):
        with patch(
            "dividend_allocator.solver.milp",
            return_value=fake_result(0, "Optimal", x=None, fun=None),
        ):
            result = solve_linear_program(make_program())

        assert result.status is LpStatus.SOLVER_FAILURE

    @pytest.mark.parametrize(
        "code,error",
        [(1, SolverFailureError), (2, InfeasibleError), (3, UnboundedError)],
    )
    def test_strategy_surfaces_solver_errors(self, code, error):
        with patch(
            "dividend_allocator.solver.milp",
            return_value=fake_result(code, "no solution"),
        ):
            with pytest.raises(error) as exc_info:
                LinearProgramStrategy().allocate(load_reference_securities(), 75000, 0.33)

        assert isinstance(exc_info.value, SolverError)
        assert exc_info.value.message == "no solution"


class TestLpResult:
    def test_solution_of_optimal_result(self):
        result = LpResult(
            status=LpStatus.OPTIMAL,
            message="ok",
            x=np.array([1.0]),
            objective_value=2.0,
        )
        value, x = result.solution()
        assert value == 2.0
        assert x[0] == 1.0

    def test_solution_of_unbounded_result_raises(self):
        result = LpResult(status=LpStatus.UNBOUNDED, message="unbounded")
        with pytest.raises(UnboundedError):
            result.solution()

    def test_optimal_result_without_solution_raises(self):
        result = LpResult(status=LpStatus.OPTIMAL, message="Optimal")
        with pytest.raises(SolverFailureError, match="no solution"):
            result.solution()
