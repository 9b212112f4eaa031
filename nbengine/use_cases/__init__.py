"""Use-cases: orchestration over components and factories."""
