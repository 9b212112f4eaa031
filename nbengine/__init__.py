"""Gaussian Naive Bayes engine.

Layout:
- core/         error taxonomy, shape checks
- components/   model, trainer, predictor, evaluation, loaders, splitters
- contracts/    pydantic configs and results
- factories/    strategy construction
- io/           readers and label encoding
- use_cases/    orchestration
- api.py        stable public surface
"""

__version__ = "0.1.0"
