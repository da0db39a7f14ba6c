"""Shared fixtures for tests."""

from pathlib import Path

import pytest

from saxcodec.codec.importer import import_document
from saxcodec.schema.loader import load_catalog_from_string


@pytest.fixture
def examples_dir() -> Path:
    """Return the path to the examples directory."""
    return Path(__file__).parent.parent / "examples"


@pytest.fixture
def catalog_yaml() -> str:
    """Return a small kit catalog."""
    return """
kits:
  sys:
    checksum: cafe01
    types:
      Folder:
        folder: true
  control:
    checksum: beef02
    types:
      Add2:
        slots:
          - name: in1
            direction: input
            type: float
          - name: in2
            direction: input
            type: float
          - name: out
            direction: output
            type: float
      Timer:
        slots:
          - name: out
            direction: output
            type: bool
"""


@pytest.fixture
def catalog(catalog_yaml):
    """Return a parsed catalog."""
    return load_catalog_from_string(catalog_yaml)


@pytest.fixture
def basic_sax() -> str:
    """Return a small SAX document with nesting, properties and links."""
    return """<?xml version="1.0"?>
<sedonaApp>
  <schema>
    <kit name="sys" checksum="cafe01"/>
    <kit name="control"/>
  </schema>
  <app>
    <prop name="appName" val="Plant"/>
    <comp name="AHU_1" id="1" type="sys::Folder">
      <comp name="Tstat2" id="5" type="control::Add2">
        <prop name="meta" val="7"/>
        <prop name="in1" val="3.14159"/>
        <prop name="in2" val="3"/>
      </comp>
      <comp name="Comp1EN" id="2" type="control::Add2">
        <prop name="in1" val="3.0"/>
      </comp>
    </comp>
    <comp name="Clock" id="3" type="control::Timer">
      <prop name="enabled" val="true"/>
      <prop name="label" val="Night shift"/>
    </comp>
  </app>
  <links>
    <link from="/AHU_1/Tstat2.out" to="/AHU_1/Comp1EN.in1"/>
    <link from="/Clock.out" to="/AHU_1/Tstat2.in2"/>
  </links>
</sedonaApp>
"""


@pytest.fixture
def basic_project(basic_sax, catalog):
    """Return the basic document imported against the catalog."""
    return import_document(basic_sax, owner="alice", catalog=catalog)
