"""Shared test configuration.

Hypothesis Configuration:
- "ci" profile: derandomized, 100 examples - default
- "nightly" profile: random seeds, 1000 examples
- "debug" profile: 10 examples with verbose output

Set profile via environment variable:
    HYPOTHESIS_PROFILE=nightly pytest tests/
"""

import os

from hypothesis import Verbosity, settings

settings.register_profile("ci", max_examples=100, derandomize=True, deadline=None)
settings.register_profile("nightly", max_examples=1000, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "ci"))
