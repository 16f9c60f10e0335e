"""
Diagnosis Session
Caller-owned state around the predictor: simulated training and latency
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence

import config
from metrics import build_batch_report
from model import Feature, ModelVariant, predict


logger = logging.getLogger(__name__)


class ModelNotTrainedError(RuntimeError):
    """Raised when a diagnosis is requested before training"""


@dataclass(frozen=True)
class TrainingMetrics:
    variant: ModelVariant
    accuracy: float
    f1_score: float
    training_time: float


@dataclass
class DiagnosisSession:
    """
    Caller-owned UI state: selected model and training status.

    Training and prediction are simulated; the wait is injected through
    `latency` and `sleep` so tests can run without delay.
    """
    variant: ModelVariant = ModelVariant.RNA
    sleep: Callable[[float], None] = field(default=time.sleep, repr=False)
    training_metrics: Optional[TrainingMetrics] = None
    training_file: Optional[str] = None

    @property
    def is_trained(self):
        return self.training_metrics is not None

    def select_variant(self, variant: ModelVariant):
        self.variant = variant

    def _wait(self, latency: float) -> float:
        start = time.perf_counter()
        if latency > 0:
            self.sleep(latency)
        return time.perf_counter() - start

    def train(self, file_name: Optional[str], latency: float = config.TRAINING_DELAY) -> TrainingMetrics:
        """
        Simulate training the selected model on an uploaded dataset

        Args:
            file_name (str): Name of the uploaded dataset (content is not read)
            latency (float): Simulated training time in seconds

        Returns:
            TrainingMetrics: Fixed metrics for the variant plus elapsed time
        """
        if not file_name:
            raise ValueError("A training dataset is required")

        elapsed = self._wait(latency)
        reported = self.variant.training_metrics
        self.training_metrics = TrainingMetrics(
            variant=self.variant,
            accuracy=reported['accuracy'],
            f1_score=reported['f1_score'],
            training_time=elapsed,
        )
        self.training_file = file_name
        logger.info("Model %s trained with %s in %.2fs", self.variant.value, file_name, elapsed)
        return self.training_metrics

    def _require_trained(self):
        if not self.is_trained:
            raise ModelNotTrainedError("Train the model with the dataset first")

    def diagnose(self, features: Sequence[Feature], latency: float = config.PREDICTION_DELAY):
        """
        Simulated individual diagnosis

        Returns:
            tuple: (PredictionResult, elapsed seconds)
        """
        self._require_trained()
        elapsed = self._wait(latency)
        result = predict(features, self.variant)
        logger.info("Diagnosis with %s: %s (confidence %.3f)",
                    self.variant.value, result.disease.value, result.confidence)
        return result, elapsed

    def run_batch(self, file_name: Optional[str], latency: float = config.BATCH_DELAY):
        """
        Simulated batch analysis; metrics come from the fixed confusion matrix

        Returns:
            metrics.BatchReport
        """
        self._require_trained()
        if not file_name:
            raise ValueError("A patient data file is required")

        elapsed = self._wait(latency)
        report = build_batch_report(self.variant, elapsed)
        logger.info("Batch %s processed with %s: %d patients",
                    file_name, self.variant.value, report.metrics.total_samples)
        return report
