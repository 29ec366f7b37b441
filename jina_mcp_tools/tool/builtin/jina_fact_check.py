"""
JinaFactCheckTool: ground a statement against web sources (legacy tool set).
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from jina_mcp_tools.tool.builtin.jina_tool import JinaTool
from jina_mcp_tools.utils.tojson import to_json


class FactCheckParams(BaseModel):
    model_config = ConfigDict(extra="ignore")

    statement: str = Field(min_length=1)
    deepdive: bool = False


class JinaFactCheckTool(JinaTool):
    params_model = FactCheckParams

    def get_name(self) -> str:
        return "jina_fact_check"

    def get_description(self) -> str:
        return "Verify the factuality of statements using Jina AI's fact-checking capability"

    def get_parameters(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "statement": {
                    "type": "string",
                    "minLength": 1,
                    "description": "Statement to fact-check for accuracy",
                },
                "deepdive": {
                    "type": "boolean",
                    "default": False,
                    "description": "Enable deep analysis with more comprehensive research",
                },
            },
            "required": ["statement"],
        }

    async def run(self, params: FactCheckParams) -> tuple[str, Any]:
        payload = await self.client.fact_check(params.statement, deepdive=params.deepdive)
        return to_json(payload, indent=True), payload
