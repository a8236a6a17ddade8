# MIT License (see LICENSE)
"""
The frame driver.

Scene is the host-side container a visualization keeps between frames. It
holds the inputs of every component (charges, wave sources, the barrier and
collision bodies), calls the numeric kernels and caches the expensive ones.

Per-frame work:
    - wave_heights(time): the traveling wave surface.
    - step(dt): integrate bodies, resolve collisions, record trails.

Change-driven work (cached until the inputs change):
    - field_lines(): the field-line bundle for the current charges.
    - interference_pattern(time): the intensity mesh for the current sources.
    - wavefunction(time), transmission(), transmission_curve(): barrier data.

Change detection compares a value key built from the inputs and the
relevant config, so mutating the lists in place, replacing them, or
swapping a config all invalidate the right cache entries.

Structure:
    - Host creates a Scene (directly or via physics_viz.io.load_scenario).
    - Host edits charges/sources/bodies from its UI state.
    - Host calls step(dt) and the getters once per frame and hands the
      results to a RendererAdapter.
"""
from __future__ import annotations
import contextlib
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Hashable

import numpy as np

from .config import FieldLineConfig, WaveMeshConfig, WavefunctionConfig, TrailConfig
from .types import Body, Charge, WaveSource, BarrierConfig
from .profiler import Profiler
from .core.field import FieldLine, field_line_bundle
from .core.waves import InterferencePattern, interference_pattern, height_field, mesh_axes
from .core.quantum import TunnelingResult, WavefunctionSamples, tunneling_for, wavefunction, transmission_curve
from .core.trail import TrailBuffer, record
from .core.integrators import euler_step_all, with_velocities
from .collision.impulse import resolve_collisions

logger = logging.getLogger(__name__)


@dataclass
class Scene:
    """
    Visualization state and frame loop.

    Attributes:
        charges: Point charges for the field view.
        sources: Wave sources for the interference view.
        barrier: Barrier for the tunneling view, or None.
        bodies: Collision bodies. step() replaces entries with new Body
            records; it never mutates them.
        gravity: Uniform acceleration applied to bodies [gx, gy, gz].
        dt: Default timestep for step().
        field_config: Field-line tracing parameters.
        wave_config: Interference mesh parameters.
        wavefunction_config: Barrier wavefunction sampling grid.
        trail_config: Trail capacity per body.
        profiler: Optional Profiler timing each frame section.
        time: Simulation time in seconds.
        trails: One TrailBuffer per body, owned by the scene.
    """
    charges: list[Charge] = field(default_factory=list)
    sources: list[WaveSource] = field(default_factory=list)
    barrier: BarrierConfig | None = None
    bodies: list[Body] = field(default_factory=list)
    gravity: tuple[float, float, float] = (0.0, 0.0, 0.0)
    dt: float = 1 / 60
    field_config: FieldLineConfig = field(default_factory=FieldLineConfig)
    wave_config: WaveMeshConfig = field(default_factory=WaveMeshConfig)
    wavefunction_config: WavefunctionConfig = field(default_factory=WavefunctionConfig)
    trail_config: TrailConfig = field(default_factory=TrailConfig)
    profiler: Profiler | None = None
    time: float = 0.0
    trails: list[TrailBuffer] = field(default_factory=list)

    def __post_init__(self) -> None:
        self._cache: dict[str, tuple[Hashable, Any]] = {}
        self.recomputations: dict[str, int] = {}
        self._sync_trails()

    # -------------------------------------------------------------------------
    # Scene editing
    # -------------------------------------------------------------------------

    def add_body(self, body: Body) -> int:
        """
        Add a collision body with a fresh trail.

        Returns:
            The body's index in `bodies`.
        """
        self.bodies.append(body)
        self.trails.append(TrailBuffer(self.trail_config.max_length))
        return len(self.bodies) - 1

    def add_charge(self, charge: Charge) -> None:
        self.charges.append(charge)

    def add_source(self, source: WaveSource) -> None:
        self.sources.append(source)

    def clear_trails(self) -> None:
        for trail in self.trails:
            trail.clear()

    # -------------------------------------------------------------------------
    # Change detection
    # -------------------------------------------------------------------------

    def _section(self, name: str):
        if self.profiler is None:
            return contextlib.nullcontext()
        return self.profiler.section(name)

    def _cached(self, name: str, key: Hashable, build: Callable[[], Any]) -> Any:
        """Return the cached value for `name` unless its key changed."""
        entry = self._cache.get(name)
        if entry is not None and entry[0] == key:
            return entry[1]
        with self._section(name):
            value = build()
        self._cache[name] = (key, value)
        self.recomputations[name] = self.recomputations.get(name, 0) + 1
        logger.debug("Recomputed %s", name)
        return value

    def _charges_key(self) -> tuple:
        return tuple((tuple(c.position), c.q) for c in self.charges)

    def _sources_key(self) -> tuple:
        return tuple(s.key() for s in self.sources)

    def invalidate(self) -> None:
        """Drop every cached result."""
        self._cache.clear()

    # -------------------------------------------------------------------------
    # Field view
    # -------------------------------------------------------------------------

    def field_lines(self) -> list[FieldLine]:
        """Field-line bundle, retraced only when charges or config change."""
        return self._cached(
            "field_lines",
            (self._charges_key(), self.field_config),
            lambda: field_line_bundle(self.charges, self.field_config),
        )

    # -------------------------------------------------------------------------
    # Wave view
    # -------------------------------------------------------------------------

    def interference_pattern(self, time: float = 0.0) -> InterferencePattern:
        """Intensity mesh, rebuilt only when sources, config or time change."""
        return self._cached(
            "interference_pattern",
            (self._sources_key(), self.wave_config, float(time)),
            lambda: interference_pattern(self.sources, time, self.wave_config),
        )

    def wave_heights(self, time: float | None = None) -> np.ndarray:
        """
        Traveling surface heights [n, n] at `time` (default: scene time).

        Recomputed on every call; only the mesh axes are cached.
        """
        t = self.time if time is None else float(time)
        xs, ys = self._cached("mesh_axes", self.wave_config, lambda: mesh_axes(self.wave_config))
        with self._section("wave_heights"):
            return height_field(
                xs, ys, self.sources, t,
                scale=self.wave_config.height_scale,
                attenuation=self.wave_config.attenuation,
            )

    # -------------------------------------------------------------------------
    # Barrier view
    # -------------------------------------------------------------------------

    def _require_barrier(self) -> BarrierConfig:
        if self.barrier is None:
            raise ValueError("Scene has no barrier configured")
        return self.barrier

    def transmission(self) -> TunnelingResult:
        barrier = self._require_barrier()
        return self._cached("transmission", barrier, lambda: tunneling_for(barrier))

    def transmission_curve(self) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        """T/R vs energy series for the chart beside the barrier view."""
        barrier = self._require_barrier()
        key = (barrier.barrier_height, barrier.barrier_width, barrier.mass)
        return self._cached(
            "transmission_curve",
            key,
            lambda: transmission_curve(barrier.barrier_height, barrier.barrier_width, barrier.mass),
        )

    def wavefunction(self, time: float | None = None) -> WavefunctionSamples:
        """Barrier wavefunction at `time` fs (default: scene time)."""
        barrier = self._require_barrier()
        t = self.time if time is None else float(time)
        return self._cached(
            "wavefunction",
            (barrier, self.wavefunction_config, t),
            lambda: wavefunction(barrier, t, self.wavefunction_config),
        )

    # -------------------------------------------------------------------------
    # Bodies
    # -------------------------------------------------------------------------

    def _sync_trails(self) -> None:
        if len(self.trails) != len(self.bodies):
            logger.debug("Rebuilding %d trails", len(self.bodies))
            self.trails = [TrailBuffer(self.trail_config.max_length) for _ in self.bodies]

    def step(self, dt: float | None = None) -> None:
        """
        Advance the bodies by one frame.

        1. Integrate positions (semi-implicit Euler under gravity).
        2. Detect and resolve collisions, replacing body velocities.
        3. Record each body's position into its trail.

        The new bodies are committed only once collisions resolve, so a
        step that raises leaves the scene as it was.

        Args:
            dt: Timestep override (defaults to self.dt).

        Raises:
            DomainError: If a contact has zero total inverse mass.
        """
        dt = self.dt if dt is None else float(dt)
        if dt < 0:
            raise ValueError(f"dt must be non-negative, got {dt}")

        with self._section("integrate"):
            moved = euler_step_all(self.bodies, dt, self.gravity)

        with self._section("collisions"):
            velocities = resolve_collisions(moved)
            self.bodies = with_velocities(moved, velocities)

        with self._section("trails"):
            self._sync_trails()
            for trail, body in zip(self.trails, self.bodies):
                record(trail, body.position)

        self.time += dt
