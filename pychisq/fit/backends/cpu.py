"""
CPU backend for chi-squared fits.

Dispatches to model-specific submodules based on design.model.
"""

from __future__ import annotations

import logging

from pychisq.core.result import Result
from pychisq.fit._common import FitParams
from pychisq.fit.design import FitDesign

logger = logging.getLogger(__name__)


class CPUFitBackend:
    """CPU reference backend for chi-squared fits."""

    @property
    def name(self) -> str:
        return 'cpu_fit'

    def solve(self, design: FitDesign) -> Result[FitParams]:
        """Dispatch to the model implementation based on design.model."""
        model = design.model

        if model == "observed_expected":
            from pychisq.fit.backends._models import observed_expected
            params, warnings_list = observed_expected(design)
        elif model == "binomial":
            from pychisq.fit.backends._models import binomial
            params, warnings_list = binomial(design)
        elif model == "poisson":
            from pychisq.fit.backends._models import poisson
            params, warnings_list = poisson(design)
        elif model == "contingency":
            from pychisq.fit.backends._contingency import contingency
            params, warnings_list = contingency(design)
        else:
            raise ValueError(f"Unknown model: {model!r}")

        logger.info(
            "%s: X² = %.6g over %d bins (parameter=%s)",
            model, params.statistic, params.expected.size, params.parameter,
        )
        for message in warnings_list:
            logger.warning("%s: %s", model, message)

        return Result(
            params=params,
            info={
                'model': model,
                'n_categories': design.n_categories,
                'group_start': params.group_start,
                'group_end': params.group_end,
            },
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
