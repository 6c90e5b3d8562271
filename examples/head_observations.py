"""
Simulated and observed heads
============================

MODFLOW writes the simulated equivalents of head observations to the ``._os``
file. Locations and times of these observations live in the comment block of
the ``.hob`` file. This example combines both to compute residuals per well.

Run from a directory with the model files::

    python head_observations.py model.hob model._os
"""

import sys

import gwgis
from gwgis.logging import LoggerType, LogLevel

# %%
# Show what is being read.

gwgis.logging.configure(LoggerType.PYTHON, LogLevel.INFO)

hob_path, os_path = sys.argv[1:3]
heads = gwgis.merge_head_observations(hob_path, os_path, sort=True)

# %%
# Residuals and their mean per well.

heads["residual"] = heads["observed_value"] - heads["simulated_equivalent"]
print(heads.groupby("well_id", observed=True)["residual"].mean())
