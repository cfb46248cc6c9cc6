from .feature import EDITABLE_FIELDS, SCALE_FIELDS, Feature, ScoredFeature, PersistedState
from .interchange import SourceKind, ImportMode, RowError, ImportResult

__all__ = [
	"EDITABLE_FIELDS",
	"SCALE_FIELDS",
	"Feature",
	"ScoredFeature",
	"PersistedState",
	"SourceKind",
	"ImportMode",
	"RowError",
	"ImportResult",
]
