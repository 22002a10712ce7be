from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serializes with camelCase keys, accepts either spelling on input."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class JobFunctionSchema(CamelModel):
    job_function_id: int
    function: str


class HeadcountSchema(CamelModel):
    active: int = Field(..., ge=0)
    inactive: int = Field(..., ge=0)
    open: int = Field(..., ge=0)
    total: int = Field(..., ge=0)


class OrgNodeSchema(CamelModel):
    id: str
    name: str
    position: str
    department: str
    job_function: JobFunctionSchema
    headcount: HeadcountSchema
    level: int = Field(..., ge=0)
    is_managerial: bool
    children: List["OrgNodeSchema"] = Field(default_factory=list)


class OrgChartRow(CamelModel):
    id: str
    parent_id: Optional[str] = None
    path: List[str]
    name: str
    position: str
    department: str
    job_function_id: int
    function: str
    level: int
    is_managerial: bool
    active: int
    inactive: int
    open: int
    total: int
    child_count: int


class ValidationReport(CamelModel):
    node_count: int
    max_depth: int
    root_ok: bool
    within_budget: bool
    level_mismatches: int
    managerial_mismatches: int
    job_function_mismatches: int
    children_past_max_level: int
    duplicate_ids: int
    is_valid: bool


class OrgChartSummary(CamelModel):
    seed: Optional[int] = None
    node_count: int
    max_depth: int
    leaf_count: int
    managerial_count: int
    nodes_per_level: Dict[int, int]
    nodes_per_department: Dict[str, int]
    headcount: HeadcountSchema
    headcount_by_level: Dict[int, HeadcountSchema]
    validation: ValidationReport


class OrgChartResponse(BaseModel):
    status: str
    data: OrgNodeSchema


class OrgChartRowsResponse(BaseModel):
    status: str
    total_count: int
    data: List[OrgChartRow]


class OrgChartSummaryResponse(BaseModel):
    status: str
    data: OrgChartSummary
