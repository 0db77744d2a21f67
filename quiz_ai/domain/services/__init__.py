"""
Domain services - бизнес-логика поверх AI клиента.
"""
from .ai_explanation import AiExplanationService, ExplanationResult, ai_explanation_service

__all__ = [
    "AiExplanationService",
    "ExplanationResult",
    "ai_explanation_service",
]
