"""
Differential Diagnosis Model
Deterministic pseudo-prediction for Dengue, Malaria and Leptospirosis
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Sequence

import config


logger = logging.getLogger(__name__)


class Disease(Enum):
    """Diseases in the fixed order used by the predictor"""
    DENGUE = 'Dengue'
    MALARIA = 'Malaria'
    LEPTOSPIROSIS = 'Leptospirosis'


class ModelVariant(Enum):
    """Selectable model; only biases the confidence calculation"""
    RNA = 'RNA'
    RLO = 'RLO'

    @property
    def title(self):
        return config.MODEL_DESCRIPTIONS[self.value][0]

    @property
    def description(self):
        return config.MODEL_DESCRIPTIONS[self.value][1]

    @property
    def training_metrics(self):
        """Accuracy (%) and F1 reported after a simulated training run"""
        return config.TRAINING_METRICS[self.value]

    @property
    def batch_scaling(self):
        return config.BATCH_METRIC_SCALING[self.value]


class Occupation(Enum):
    """Occupations encoded as one-hot feature flags"""
    AGRICULTOR = 'Agricultor'
    GANADERO = 'Ganadero'
    PESCADOR = 'Pescador'
    MINERO = 'Minero'
    CONSTRUCCION = 'Construccion'
    COMERCIANTE = 'Comerciante'
    ESTUDIANTE = 'Estudiante'
    HOGAR = 'Hogar'

    @property
    def label(self):
        return dict(config.OCCUPATIONS)[self.value]


DISEASES = tuple(Disease)

RNA_MODEL_BOOST = 0.05


@dataclass(frozen=True)
class Feature:
    """A named clinical value, string-encoded as entered in the form"""
    name: str
    value: str


@dataclass(frozen=True)
class PredictionResult:
    """
    Outcome of a single diagnosis

    Attributes:
        disease: Predicted disease.
        probabilities: Probability per disease, in DISEASES order, summing to 1.
        confidence: Largest probability (always the predicted disease's).
    """
    disease: Disease
    probabilities: Dict[Disease, float]
    confidence: float

    def as_dict(self):
        return {
            "disease": self.disease.value,
            "probabilities": {d.value: p for d, p in self.probabilities.items()},
            "confidence": self.confidence,
        }


# ============================================================
# CANONICALIZER
# ============================================================

def build_signature(features: Sequence[Feature]) -> str:
    """
    Join features as "name:value" pairs separated by "|", in input order.

    Values are used verbatim, so "37" and "37.00" give different signatures.
    """
    return "|".join(f"{f.name}:{f.value}" for f in features)


# ============================================================
# PREDICTOR
# ============================================================

def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    if value >= 0x80000000:
        value -= 0x100000000
    return value


def signature_hash(signature: str) -> int:
    """
    Polynomial rolling hash (h = h * 31 + c, 32-bit signed wraparound)
    over the UTF-16 code units of the signature.

    Returns:
        int: Absolute value of the final 32-bit hash
    """
    data = signature.encode('utf-16-le', 'surrogatepass')
    h = 0
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        h = _to_int32(h * 31 + unit)
    return abs(h)


def confidence_boost(hash_value: int, variant: ModelVariant) -> float:
    """Raw probability mass given to the predicted disease"""
    hash_modifier = (hash_value % 1000) / 1000
    model_boost = RNA_MODEL_BOOST if variant is ModelVariant.RNA else 0
    return 0.35 + hash_modifier * 0.15 + model_boost * 0.05


def predict_signature(signature: str, variant: ModelVariant) -> PredictionResult:
    """
    Map a canonical signature to a disease and a normalized distribution

    Args:
        signature (str): Output of build_signature
        variant (ModelVariant): Selected model

    Returns:
        PredictionResult: Identical for identical (signature, variant) pairs
    """
    hash_value = signature_hash(signature)
    predicted = DISEASES[hash_value % len(DISEASES)]
    boost = confidence_boost(hash_value, variant)
    logger.debug("signature hash %d -> %s (boost %.4f)", hash_value, predicted.value, boost)

    raw = {}
    total = 0.0
    for disease in DISEASES:
        if disease is predicted:
            raw[disease] = boost
        else:
            raw[disease] = (1 - boost) / 2
        total += raw[disease]

    # Sum is 1 algebraically; normalize anyway to absorb rounding
    probabilities = {disease: p / total for disease, p in raw.items()}

    return PredictionResult(
        disease=predicted,
        probabilities=probabilities,
        confidence=max(probabilities.values()),
    )


def predict(features: Sequence[Feature], variant: ModelVariant) -> PredictionResult:
    """Predict from an ordered feature sequence"""
    return predict_signature(build_signature(features), variant)


def is_deterministic(features: Sequence[Feature], variant: ModelVariant = ModelVariant.RNA) -> bool:
    """
    Run the predictor twice on the same input and compare results exactly.
    Diagnostic helper; should always return True.
    """
    first = predict(features, variant)
    second = predict(features, variant)
    return first.disease is second.disease and first.probabilities == second.probabilities
