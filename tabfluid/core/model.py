"""Real-fluid model backed by a (density, energy) lookup table.

Every property is tabulated against density and the energy offset from the
saturation curve, so only (rho, e) queries are direct look-ups.  Any other
input pair is answered by secant inversion of those look-ups:

- cheap: (rho, e), interpolation only
- moderate: (P, rho), (rho, T), (rho, h), one solve for e
- expensive: (P, T), (P, s), (h, s), a solve for rho whose residual runs a
  full solve for e at every trial density

Example:
    >>> fluid = TableFluid(table, saturation, compute_entropy=True)
    >>> fluid.set_state_PT(2.0e5, 350.0)
    >>> fluid.state.density
"""

from __future__ import annotations

import logging
from dataclasses import replace

from tabfluid.core.config import ModelConfig
from tabfluid.core.errors import ConvergenceError
from tabfluid.core.rootfind import RootResult, ScalarFunction, secant_root
from tabfluid.core.saturation import SaturationCurve
from tabfluid.core.state import FluidState
from tabfluid.core.table import LookupTable

logger = logging.getLogger(__name__)


class TableFluid:
    """Fluid model evaluating states from a shared, read-only lookup table.

    The table and saturation curve may be shared between instances; each
    instance owns one mutable :class:`FluidState` and is not thread-safe.

    Args:
        table: Tabulated fields on the (density, energy offset) grid.
        saturation: Saturation energy curve used to offset energies.
        config: Model settings; defaults to :class:`ModelConfig`.
        compute_entropy: Overrides ``config.compute_entropy`` when given.
    """

    def __init__(
        self,
        table: LookupTable,
        saturation: SaturationCurve,
        config: ModelConfig | None = None,
        compute_entropy: bool | None = None,
    ):
        config = config or ModelConfig()
        if compute_entropy is not None:
            config = replace(config, compute_entropy=compute_entropy)
        self.table = table
        self.saturation = saturation
        self._config = config
        self.state = FluidState()
        self.inner_failures = 0
        self._solves: list[RootResult] = []

    @property
    def config(self) -> ModelConfig:
        return self._config

    @property
    def compute_entropy(self) -> bool:
        return self._config.compute_entropy

    @property
    def last_solve(self) -> RootResult | None:
        """Outermost solve of the last setter call (None on the (rho, e) path)."""
        return self._solves[0] if self._solves else None

    @property
    def converged(self) -> bool:
        """True if every top-level solve of the last setter call converged."""
        return all(r.converged for r in self._solves)

    # --- Saturation energy ---

    def esat_rho(self, rho: float) -> float:
        return self.saturation.energy(rho)

    def _lookup(self, name: str, rho: float, e: float) -> float:
        de = e - self.esat_rho(rho)
        return self.table.interpolate(name, rho, de)

    # --- State variables from interpolation of the rho-e table ---

    def P_rhoe(self, rho: float, e: float) -> float:
        """Pressure [Pa]."""
        return self._lookup("P", rho, e)

    def T_rhoe(self, rho: float, e: float) -> float:
        """Temperature [K]."""
        return self._lookup("T", rho, e)

    def h_rhoe(self, rho: float, e: float) -> float:
        """Specific enthalpy [J/kg]."""
        return self._lookup("h", rho, e)

    def s_rhoe(self, rho: float, e: float) -> float:
        """Specific entropy [J/(kg·K)]."""
        return self._lookup("s", rho, e)

    def cv_rhoe(self, rho: float, e: float) -> float:
        return self._lookup("cv", rho, e)

    def cp_rhoe(self, rho: float, e: float) -> float:
        return self._lookup("cp", rho, e)

    def a2_rhoe(self, rho: float, e: float) -> float:
        """Squared speed of sound [m²/s²]."""
        return self._lookup("a2", rho, e)

    def dPdrho_e_rhoe(self, rho: float, e: float) -> float:
        return self._lookup("dPdrho_e", rho, e)

    def dPde_rho_rhoe(self, rho: float, e: float) -> float:
        return self._lookup("dPde_rho", rho, e)

    def dTdrho_e_rhoe(self, rho: float, e: float) -> float:
        return self._lookup("dTdrho_e", rho, e)

    def dTde_rho_rhoe(self, rho: float, e: float) -> float:
        return self._lookup("dTde_rho", rho, e)

    # --- Root finding on the table ---

    def _solve(self, func: ScalarFunction, x0: float) -> RootResult:
        return secant_root(func, x0, **self._config.solver_options())

    def _solve_energy(self, name: str, rho: float, target: float) -> RootResult:
        """Solve field(rho, e) = target for e, seeded at the table's lowest offset."""
        e0 = self.esat_rho(rho) + self.table.de_min

        def residual(e: float) -> float:
            return self._lookup(name, rho, e) - target

        return self._solve(residual, e0)

    def _solve_density(
        self, inner: str, inner_target: float, outer: str, outer_target: float
    ) -> RootResult:
        """Solve outer(rho, e(rho)) = outer_target for rho.

        e(rho) is itself solved from inner(rho, e) = inner_target at every
        trial density.  ``inner_failures`` counts the inner solves of this
        call that did not converge.
        """
        self.inner_failures = 0

        def residual(rho: float) -> float:
            inner_result = self._solve_energy(inner, rho, inner_target)
            if not inner_result.converged:
                self.inner_failures += 1
            return self._lookup(outer, rho, inner_result.root) - outer_target

        return self._solve(residual, self.table.rho_min)

    def e_rhoP(self, rho: float, P: float) -> float:
        return self._solve_energy("P", rho, P).root

    def e_rhoT(self, rho: float, T: float) -> float:
        return self._solve_energy("T", rho, T).root

    def e_rhoh(self, rho: float, h: float) -> float:
        return self._solve_energy("h", rho, h).root

    def rho_PT(self, P: float, T: float) -> float:
        return self._solve_density("P", P, "T", T).root

    def rho_Ps(self, P: float, s: float) -> float:
        return self._solve_density("P", P, "s", s).root

    def rho_hs(self, h: float, s: float) -> float:
        return self._solve_density("h", h, "s", s).root

    # --- Convergence bookkeeping ---

    def _begin(self) -> None:
        self._solves = []
        self.inner_failures = 0

    def _checked(self, result: RootResult, label: str) -> float:
        # Strict mode rejects any top-level solve, including the energy
        # solve that follows a density inversion.
        self._solves.append(result)
        if not result.converged:
            logger.warning(
                "%s did not converge after %d iterations (x=%g, residual=%g)",
                label,
                result.iterations,
                result.root,
                result.residual,
            )
            if self._config.strict:
                raise ConvergenceError(f"{label} did not converge", result)
        return result.root

    # --- Cheap set state call ---

    def _store(self, rho: float, e: float) -> None:
        self.state = FluidState(
            density=rho,
            static_energy=e,
            pressure=self.P_rhoe(rho, e),
            temperature=self.T_rhoe(rho, e),
            sound_speed2=self.a2_rhoe(rho, e),
            dPdrho_e=self.dPdrho_e_rhoe(rho, e),
            dPde_rho=self.dPde_rho_rhoe(rho, e),
            dTdrho_e=self.dTdrho_e_rhoe(rho, e),
            dTde_rho=self.dTde_rho_rhoe(rho, e),
            cv=self.cv_rhoe(rho, e),
            cp=self.cp_rhoe(rho, e),
            entropy=self.s_rhoe(rho, e) if self.compute_entropy else None,
        )

    def set_state_rhoe(self, rho: float, e: float) -> None:
        """Set the state from density [kg/m³] and static energy [J/kg]."""
        self._begin()
        self._store(rho, e)

    # --- Not so cheap set state calls ---

    def _set_Prho(self, P: float, rho: float) -> None:
        e = self._checked(self._solve_energy("P", rho, P), "e(rho, P)")
        self._store(rho, e)

    def _set_rhoh(self, rho: float, h: float) -> None:
        e = self._checked(self._solve_energy("h", rho, h), "e(rho, h)")
        self._store(rho, e)

    def set_energy_Prho(self, P: float, rho: float) -> None:
        """Update only the static energy from pressure and density."""
        self._begin()
        self.state.static_energy = self._checked(
            self._solve_energy("P", rho, P), "e(rho, P)"
        )

    def set_state_Prho(self, P: float, rho: float) -> None:
        self._begin()
        self._set_Prho(P, rho)

    def set_state_rhoT(self, rho: float, T: float) -> None:
        self._begin()
        e = self._checked(self._solve_energy("T", rho, T), "e(rho, T)")
        self._store(rho, e)

    def set_state_rhoh(self, rho: float, h: float) -> None:
        self._begin()
        self._set_rhoh(rho, h)

    # --- Expensive set state calls ---

    def set_state_PT(self, P: float, T: float) -> None:
        self._begin()
        rho = self._checked(self._solve_density("P", P, "T", T), "rho(P, T)")
        self._set_Prho(P, rho)

    def set_state_Ps(self, P: float, s: float) -> None:
        self._begin()
        rho = self._checked(self._solve_density("P", P, "s", s), "rho(P, s)")
        self._set_Prho(P, rho)

    def set_state_hs(self, h: float, s: float) -> None:
        self._begin()
        rho = self._checked(self._solve_density("h", h, "s", s), "rho(h, s)")
        self._set_rhoh(rho, h)

    def __repr__(self) -> str:
        return (
            f"TableFluid({self.table.nx}x{self.table.ny} table, "
            f"compute_entropy={self.compute_entropy})"
        )
