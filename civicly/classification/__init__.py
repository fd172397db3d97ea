from civicly.classification.base import BaseClassifier
from civicly.classification.classifier import IssueClassifier
from civicly.classification.factory import ClassifierFactory
from civicly.classification.labels import IssueLabel, parse_label

__all__ = ["BaseClassifier", "ClassifierFactory", "IssueClassifier", "IssueLabel", "parse_label"]
