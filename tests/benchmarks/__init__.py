"""Benchmarks package – uses pytest-benchmark.

Not collected by default (``testpaths`` points at ``tests/unit``).  Run with::

    pytest tests/benchmarks/ -v
    pytest tests/benchmarks/ -v --benchmark-sort=median

To run as plain functional tests without benchmark overhead::

    pytest tests/benchmarks/ --benchmark-disable
"""
