# scripts/run_gnb_local.py
from __future__ import annotations

import logging

from nbengine.contracts.eval_configs import EvalModel
from nbengine.contracts.model_configs import GaussianNBConfig
from nbengine.contracts.run_config import DataModel, RunConfig
from nbengine.contracts.split_configs import SplitResubstitutionModel
from nbengine.settings import log_level
from nbengine.use_cases.classification import run_classification

# ==== EDIT THESE VALUES AS YOU LIKE ==========================================
# Paths are relative to NBENGINE_DATA_ROOT (default: current directory).
DATASETS = [
    ("Banknote Authentication", DataModel(path="banknote_authentication.csv", label_mode="int")),
    ("Iris", DataModel(path="Iris/iris.csv", label_mode="string")),
]

SPLIT = SplitResubstitutionModel()      # or SplitHoldoutModel(train_frac=0.75)
MODEL = GaussianNBConfig()              # var_floor defaults to NBENGINE_VAR_FLOOR / 1e-9
EVAL  = EvalModel(metric="accuracy")    # "accuracy"|"balanced_accuracy"|"f1_macro"
# ============================================================================

def main():
    logging.basicConfig(level=log_level(), format="%(levelname)s %(name)s: %(message)s")
    for i, (title, data) in enumerate(DATASETS):
        if i:
            print()
        print(f"Analyzing {title} Dataset:")
        cfg = RunConfig(data=data, split=SPLIT, model=MODEL, eval=EVAL)
        result = run_classification(cfg)
        print(f"Accuracy: {result.accuracy}")

if __name__ == "__main__":
    main()
