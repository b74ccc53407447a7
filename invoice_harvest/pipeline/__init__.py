"""
Pipeline Module for Invoice Harvest.

This module runs source documents through the pipeline stages in order
and collects per-document outcomes into a run summary.

Author: ML Engineering Team
"""

from .driver import PipelineDriver
from .results import SourceItem, ItemOutcome, RunSummary

__all__ = ['PipelineDriver', 'SourceItem', 'ItemOutcome', 'RunSummary']
