"""Shared fixtures: descriptor lists for a handful of representative schemas."""

from __future__ import annotations

import pytest

from device_schema import NodeDescriptor, SchemaTree, TreeBuilder


@pytest.fixture
def builder() -> TreeBuilder:
    """A fresh TreeBuilder with default limits."""
    return TreeBuilder()


@pytest.fixture
def minimal_descriptors() -> tuple[NodeDescriptor, ...]:
    """root -> v (double)."""
    return (
        NodeDescriptor(name="root", type="object", children=("v",)),
        NodeDescriptor(name="v", type="double", parent="root"),
    )


@pytest.fixture
def weather_descriptors() -> tuple[NodeDescriptor, ...]:
    """A weather station payload with an array of readings.

    station (object)
      readings (array, size 3)
        reading (object)
          temperature (double, celsius)
          timestamp (date)
      location (string)
    """
    return (
        NodeDescriptor(
            name="station", type="object", children=("readings", "location")
        ),
        NodeDescriptor(
            name="readings",
            type="array",
            parent="station",
            children=("reading",),
            size=3,
        ),
        NodeDescriptor(
            name="reading",
            type="object",
            parent="readings",
            children=("temperature", "timestamp"),
        ),
        NodeDescriptor(
            name="temperature", type="double", parent="reading", unit="celsius"
        ),
        NodeDescriptor(name="timestamp", type="date", parent="reading"),
        NodeDescriptor(name="location", type="string", parent="station"),
    )


@pytest.fixture
def weather_tree(
    builder: TreeBuilder, weather_descriptors: tuple[NodeDescriptor, ...]
) -> SchemaTree:
    return builder.build(weather_descriptors)


@pytest.fixture
def twin_sensor_descriptors() -> tuple[NodeDescriptor, ...]:
    """Two structurally identical sensors under different parents.

    hub
      indoor (object)
        climate_in (object): temp_in (double), hum_in (int)
      outdoor (object)
        climate_out (object): hum_out (int), temp_out (double)
    """
    return (
        NodeDescriptor(name="hub", type="object", children=("indoor", "outdoor")),
        NodeDescriptor(
            name="indoor", type="object", parent="hub", children=("climate_in",)
        ),
        NodeDescriptor(
            name="climate_in",
            type="object",
            parent="indoor",
            children=("temp_in", "hum_in"),
        ),
        NodeDescriptor(name="temp_in", type="double", parent="climate_in"),
        NodeDescriptor(name="hum_in", type="int", parent="climate_in"),
        NodeDescriptor(
            name="outdoor", type="object", parent="hub", children=("climate_out",)
        ),
        NodeDescriptor(
            name="climate_out",
            type="object",
            parent="outdoor",
            children=("hum_out", "temp_out"),
        ),
        NodeDescriptor(name="hum_out", type="int", parent="climate_out"),
        NodeDescriptor(name="temp_out", type="double", parent="climate_out"),
    )


@pytest.fixture
def climate_pattern(builder: TreeBuilder) -> SchemaTree:
    """Pattern schema: p_root -> climate (object) -> temp (double), hum (int)."""
    return builder.build(
        [
            NodeDescriptor(name="p_root", type="object", children=("climate",)),
            NodeDescriptor(
                name="climate",
                type="object",
                parent="p_root",
                children=("temp", "hum"),
            ),
            NodeDescriptor(name="temp", type="double", parent="climate"),
            NodeDescriptor(name="hum", type="int", parent="climate"),
        ]
    )
