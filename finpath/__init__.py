"""
FinPath - Personal Finance Trajectory Simulator

A deterministic engine that projects net worth, savings and debt from six
economic assumptions, scores financial resilience and flags behavioral
biases between successive scenarios.

Modules
-------
- rates         : Slider normalization into validated ``Inputs``
- amortization  : Fixed-installment loan amortization
- trajectory    : Year-by-year wealth simulation (nominal and real)
- opportunity   : Opportunity cost of discretionary spending
- risk          : Resilience score and risk bands
- behavior      : Behavioral bias detection between snapshots
- personas      : Persona presets
- engine        : One-shot evaluation (KPIs, breakdown, recommendations)
- scenario      : Saved-scenario comparison, smart vs impulsive
- serialization : JSON snapshots
- plotting      : Trajectory charts
- utils         : Shared utilities (validation, rates, formatting)

"""

__version__ = "0.1.0"

from .rates import Inputs, normalize
from .trajectory import Trajectory, YearRecord, simulate
from .opportunity import estimate_opportunity_cost
from .risk import RiskAssessment, RiskBand, score
from .behavior import BehaviorSignal, BiasKind, Severity, detect
from .engine import Evaluation, evaluate
from .exceptions import FinPathError, InvalidInputError
from . import utils
