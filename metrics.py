"""
Batch evaluation metrics
Derived from the fixed confusion matrix shown in the batch analysis panel
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

import pandas as pd

import config
from model import ModelVariant


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClassMetrics:
    disease: str
    precision: float
    recall: float
    f1_score: float


@dataclass(frozen=True)
class BatchMetrics:
    """
    Summary metrics of a batch run

    Attributes:
        accuracy, precision, recall, f1_score: Macro-averaged, in [0, 1]
        total_samples: Number of patients in the confusion matrix
        prediction_time: Elapsed seconds of the (simulated) run
    """
    accuracy: float
    precision: float
    recall: float
    f1_score: float
    total_samples: int
    prediction_time: float

    @property
    def throughput(self) -> Optional[float]:
        """Patients per second, None when no time elapsed"""
        if self.prediction_time <= 0:
            return None
        return self.total_samples / self.prediction_time


@dataclass(frozen=True)
class BatchReport:
    confusion_matrix: List[List[int]]
    diseases: List[str]
    metrics: BatchMetrics
    per_class: List[ClassMetrics]


def _f1(precision, recall):
    if precision + recall == 0:
        return 0.0
    return 2 * precision * recall / (precision + recall)


def class_metrics(matrix, diseases=None):
    """
    Per-class precision, recall and F1

    Args:
        matrix (list): Square matrix, rows = actual, columns = predicted
        diseases (list): Class labels in matrix order

    Returns:
        list: ClassMetrics per class
    """
    diseases = diseases or config.DISEASE_NAMES
    results = []
    for i, disease in enumerate(diseases):
        true_positives = matrix[i][i]
        predicted_total = sum(row[i] for row in matrix)
        actual_total = sum(matrix[i])
        precision = true_positives / predicted_total if predicted_total else 0.0
        recall = true_positives / actual_total if actual_total else 0.0
        results.append(ClassMetrics(disease, precision, recall, _f1(precision, recall)))
    return results


def accuracy(matrix):
    total = sum(sum(row) for row in matrix)
    if total == 0:
        return 0.0
    correct = sum(matrix[i][i] for i in range(len(matrix)))
    return correct / total


def build_batch_report(variant: ModelVariant, prediction_time: float, matrix=None):
    """
    Build the batch panel report for a model variant

    Each metric is scaled by the variant's factor in
    config.BATCH_METRIC_SCALING (RNA 1.0, RLO slightly lower).

    Args:
        variant (ModelVariant): Selected model; plain strings are rejected
        prediction_time (float): Elapsed seconds of the simulated run
        matrix (list): Confusion matrix, defaults to config.BATCH_CONFUSION_MATRIX

    Returns:
        BatchReport
    """
    if not isinstance(variant, ModelVariant):
        raise TypeError(f"Unknown model variant: {variant!r}")
    matrix = matrix or config.BATCH_CONFUSION_MATRIX

    per_class = class_metrics(matrix)
    n = len(per_class)
    values = {
        'accuracy': accuracy(matrix),
        'precision': sum(c.precision for c in per_class) / n,
        'recall': sum(c.recall for c in per_class) / n,
        'f1_score': sum(c.f1_score for c in per_class) / n,
    }
    scaling = variant.batch_scaling
    values = {k: v * scaling[k] for k, v in values.items()}

    metrics = BatchMetrics(
        total_samples=sum(sum(row) for row in matrix),
        prediction_time=prediction_time,
        **values,
    )
    logger.debug("Batch metrics for %s: %s", variant.value, metrics)
    return BatchReport(
        confusion_matrix=[list(row) for row in matrix],
        diseases=list(config.DISEASE_NAMES),
        metrics=metrics,
        per_class=per_class,
    )


# ============================================================
# TABLES & EXPORT
# ============================================================

def confusion_matrix_frame(report):
    """Confusion matrix as a labeled DataFrame (Real rows, Predicted columns)"""
    return pd.DataFrame(
        report.confusion_matrix,
        index=[f"Real: {d}" for d in report.diseases],
        columns=[f"Predicted: {d}" for d in report.diseases],
    )


def confusion_share_frame(report):
    """Each cell as a percentage of all samples"""
    frame = confusion_matrix_frame(report)
    total = report.metrics.total_samples
    if total == 0:
        return frame.astype(float)
    return (frame / total * 100).round(1)


def metrics_frame(report):
    m = report.metrics
    rows = [
        ('Accuracy', m.accuracy),
        ('Precision', m.precision),
        ('Recall', m.recall),
        ('F1-Score', m.f1_score),
        ('Total Samples', m.total_samples),
        ('Prediction Time (s)', round(m.prediction_time, 2)),
    ]
    # object dtype keeps the sample count an integer in the CSV
    return pd.DataFrame({
        'Metric': [name for name, _ in rows],
        'Value': pd.Series([value for _, value in rows], dtype=object),
    })


def export_csv(report) -> bytes:
    """
    Metrics followed by the confusion matrix, as UTF-8 CSV

    Returns:
        bytes: Ready for st.download_button
    """
    metrics_csv = metrics_frame(report).to_csv(index=False)
    matrix_csv = confusion_matrix_frame(report).to_csv(index_label='Actual')
    return (metrics_csv + "\n" + matrix_csv).encode('utf-8')
