"""
Orchestration.
Single pipeline: workbook bytes → name lists → teams → PDF.
"""

from .pipeline import PipelineResult, run_pipeline, save_document

__all__ = ["run_pipeline", "save_document", "PipelineResult"]
