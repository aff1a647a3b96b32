"""
Hireflow package for recruitment pipeline tooling.

This package contains the deterministic scoring engine used by the
recruitment application together with the record, analytics and
command line layers around it.

The main pieces are:

1. **scoring** - the pseudo-AI engine.  Résumé scoring, candidate to
   job matching, interview question selection and candidate ranking,
   all derived from a hash of the input text so results are
   reproducible.  :class:`~hireflow.scoring.ScoringEngine` adds a
   simulated, cancellable latency in front of each operation.
2. **records** - job, candidate and interview records and their CSV
   files.
3. **analytics** - funnel, time-to-hire, conversion and trend figures
   computed from the records.
4. **config** - engine settings from YAML and ``HIREFLOW_*``
   environment variables.
5. **cli** - command line entry point wiring the above together.
"""

from importlib import metadata

from .config import EngineConfig, load_config  # noqa: F401
from .errors import (  # noqa: F401
    ConfigError,
    HireflowError,
    InvalidInputError,
    RecordError,
    ScoringAborted,
)

try:
    __version__ = metadata.version("hireflow")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0"
