import logging
from typing import Optional
from fastapi import APIRouter, HTTPException, Query, status

from org_chart.config import GenerationConfig
from org_chart.generators.org_tree_generator import OrgTreeGenerator
from org_chart.graph import aggregation
from org_chart.graph.validator import TreeValidator
from schemas.org_chart_schemas import (
    OrgChartResponse,
    OrgChartRowsResponse,
    OrgChartSummaryResponse,
)

logger = logging.getLogger(__name__)

org_chart_router = APIRouter(prefix="/org-chart", tags=["Org Chart"])

SEED_QUERY = Query(default=None, description="Random seed for a reproducible chart")


def _generate(seed: Optional[int]):
    config = GenerationConfig.from_settings(seed=seed)
    return config, OrgTreeGenerator(config).generate()


@org_chart_router.get(
    "",
    response_model=OrgChartResponse,
    status_code=status.HTTP_200_OK
)
def get_org_chart(seed: Optional[int] = SEED_QUERY):
    """Generate an org chart and return it as a nested tree."""
    try:
        _, root = _generate(seed)
        return {"status": "success", "data": root.to_dict()}
    except Exception as e:
        logger.error(f"Error generating org chart: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to generate org chart: {str(e)}"
        )


@org_chart_router.get(
    "/rows",
    response_model=OrgChartRowsResponse,
    status_code=status.HTTP_200_OK
)
def get_org_chart_rows(seed: Optional[int] = SEED_QUERY):
    """Generate an org chart and return it as flat grid rows."""
    try:
        _, root = _generate(seed)
        rows = aggregation.flatten(root)
        return {"status": "success", "total_count": len(rows), "data": rows}
    except Exception as e:
        logger.error(f"Error generating org chart rows: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to generate org chart rows: {str(e)}"
        )


@org_chart_router.get(
    "/summary",
    response_model=OrgChartSummaryResponse,
    status_code=status.HTTP_200_OK
)
def get_org_chart_summary(seed: Optional[int] = SEED_QUERY):
    """Generate an org chart and return its statistics and validation report."""
    try:
        config, root = _generate(seed)
        summary = aggregation.summarize(root, seed=config.seed)
        summary["validation"] = TreeValidator(config.node_budget, config.max_level).validate(root)
        return {"status": "success", "data": summary}
    except Exception as e:
        logger.error(f"Error summarizing org chart: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to summarize org chart: {str(e)}"
        )
