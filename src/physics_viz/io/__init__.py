# MIT License (see LICENSE)
"""
Scenario files.

This subpackage provides:
    - JSON serialization: Save and load a Scene's inputs and settings.
    - Round-trip support: A saved scenario loads back to an equivalent Scene.

Typical usage:
    from physics_viz.io import load_scenario, save_scenario

    scene = load_scenario("two_charges.json")
    save_scenario(scene, "output.json")
"""
from .json_io import (
    load_scenario,
    load_scenario_raw,
    save_scenario,
    scenario_from_json,
    scenario_to_json,
    body_from_json,
    body_to_json,
    charge_from_json,
    source_from_json,
    barrier_from_json,
    config_from_json,
)

__all__ = [
    # Loading
    "load_scenario",
    "load_scenario_raw",
    "scenario_from_json",
    # Saving
    "save_scenario",
    "scenario_to_json",
    # Records
    "body_from_json",
    "body_to_json",
    "charge_from_json",
    "source_from_json",
    "barrier_from_json",
    "config_from_json",
]
