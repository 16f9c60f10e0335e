"""
Form helpers for the Streamlit panels
Upload checks, field validation and feature assembly in the fixed form order
"""

import math
import re
from typing import Dict, List, Mapping, Optional

import config
from model import Feature, Occupation


# Plain decimal, optional exponent; no nan/inf or digit separators
NUMBER_PATTERN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def is_supported_upload(file_name: str, mime_type: Optional[str] = None) -> bool:
    """Accept CSV/XLSX uploads by MIME type or by extension"""
    if mime_type in config.ACCEPTED_MIME_TYPES:
        return True
    return bool(file_name) and file_name.lower().endswith(config.ACCEPTED_EXTENSIONS)


def require_supported_upload(file_name: str, mime_type: Optional[str] = None) -> str:
    if not is_supported_upload(file_name, mime_type):
        raise ValueError(f"Invalid format: {file_name}. Upload a CSV or XLSX file with clinical data")
    return file_name


def missing_fields(values: Mapping[str, str]) -> List[str]:
    """Names of lab fields left empty"""
    return [name for name, value in values.items() if not str(value).strip()]


def non_numeric_fields(values: Mapping[str, str]) -> List[str]:
    """Names of filled lab fields that are not plain finite numbers"""
    invalid = []
    for name, value in values.items():
        value = str(value).strip()
        if not value:
            continue
        if not NUMBER_PATTERN.fullmatch(value) or not math.isfinite(float(value)):
            invalid.append(name)
    return invalid


def default_variables() -> List[str]:
    return [name for name, _, _ in config.MEDICAL_VARIABLES[:config.DEFAULT_VARIABLE_COUNT]]


def assemble_features(
    lab_values: Mapping[str, str],
    symptoms: Optional[Mapping[str, bool]] = None,
    occupation: Optional[Occupation] = None,
) -> List[Feature]:
    """
    Build the feature sequence passed to the predictor.

    Order is fixed: lab variables in config.MEDICAL_VARIABLES order, then
    every symptom flag ("0"/"1") in config.SYMPTOMS order, then the one-hot
    occupation flags in Occupation order. Lab values are passed through as
    typed (surrounding whitespace removed); the predictor is sensitive to
    their formatting.

    Args:
        lab_values (dict): Lab variable name -> value string
        symptoms (dict): Symptom name -> present; omitted symptoms count as absent
        occupation (Occupation): Selected occupation, or None to skip the flags
    """
    features = [
        Feature(name, str(lab_values[name]).strip())
        for name, _, _ in config.MEDICAL_VARIABLES
        if name in lab_values
    ]

    if symptoms is not None:
        for name, _ in config.SYMPTOMS:
            features.append(Feature(name, "1" if symptoms.get(name) else "0"))

    if occupation is not None:
        for member in Occupation:
            features.append(Feature(member.value, "1" if member is occupation else "0"))

    return features


def probability_rows(result) -> List[Dict[str, object]]:
    """Rows for the per-disease probability chart"""
    return [
        {'Disease': disease.value, 'Probability': prob, 'Percentage': f"{prob * 100:.1f}%"}
        for disease, prob in result.probabilities.items()
    ]
