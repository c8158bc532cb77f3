"""
Pydantic models for pixelgraph results.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Operation(str, Enum):
    """Region operations the pipeline can run."""
    FILL = "fill"
    OUTLINE = "outline"
    COUNT = "count"


class Traversal(str, Enum):
    DFS = "dfs"
    BFS = "bfs"


class ImageMeta(BaseModel):
    """Metadata for an input image."""
    width: int = Field(..., ge=0)
    height: int = Field(..., ge=0)
    source_path: str = ""

    model_config = ConfigDict(extra="forbid")


class RegionReport(BaseModel):
    """Outcome of one region operation on one image."""
    operation: Operation
    image_meta: ImageMeta
    traversal: Optional[Traversal] = None
    start: Optional[List[int]] = None  # [x, y]
    color: Optional[List[int]] = None
    painted_pixels: int = 0
    component_count: Optional[int] = None
    output_path: str = ""

    model_config = ConfigDict(extra="forbid")
