#!/usr/bin/env python3
"""MCP Server for True Tax Cost.

This server exposes the state tax comparison and Social Security estimates
as MCP tools, allowing AI assistants to answer questions such as "how much
would I save moving from Illinois to Florida?".
"""

import os
import sys
import json
import asyncio
from typing import Any

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

from tools import MultiProgramTools


# Create the MCP server
server = Server("true-tax-cost")

# Global tools instance (initialized on first call)
tools: MultiProgramTools | None = None


def get_tools() -> MultiProgramTools:
    """Get or initialize the tools instance."""
    global tools
    if tools is None:
        # Default program can be set via TRUE_TAX_COST_PROGRAM env var
        default_program = os.environ.get('TRUE_TAX_COST_PROGRAM')
        base_path = os.path.join(os.path.dirname(__file__), '..')
        tools = MultiProgramTools(base_path, default_program)
    return tools


PROGRAM_PARAM = {
    "type": "string",
    "description": "The program name (folder in input-parameters). If not specified, uses the default program. Use list_programs to see available programs."
}

MONEY = {"type": "number", "minimum": 0}
ANNUAL_RETURN = {"type": "number", "description": "Expected annual return, e.g. 0.10 for 10% (default 0.10)"}
FILING_STATUS = {"type": "string", "enum": ["SINGLE", "MFJ", "HOH"], "description": "Filing status (default SINGLE)"}

WORK_HISTORY_PROPERTIES = {
    "income": {**MONEY, "description": "Annual wages, assumed constant for every working year"},
    "startYear": {"type": "integer", "description": "First year worked (default: current year minus yearsWorked)"},
    "yearsWorked": {"type": "integer", "description": "Consecutive years worked, 1-50 (default 35)"},
    "birthYear": {"type": "integer", "description": "Year of birth; sets the indexing, eligibility and claim years"},
    "annualReturn": ANNUAL_RETURN,
}


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List available tax and Social Security tools."""
    return [
        Tool(
            name="list_states",
            description="List every state with tax rules available, sorted by name.",
            inputSchema={"type": "object", "properties": {}, "required": []}
        ),
        Tool(
            name="estimate_state_tax",
            description="Estimate one state's yearly income tax (including surtaxes) and property tax.",
            inputSchema={
                "type": "object",
                "properties": {
                    "state": {"type": "string", "description": "Two-letter state key, e.g. IL"},
                    "income": {**MONEY, "description": "Gross yearly income"},
                    "homeValue": {**MONEY, "description": "Home value for property tax (default 0)"},
                    "filingStatus": FILING_STATUS,
                },
                "required": ["state", "income"]
            }
        ),
        Tool(
            name="compare_states",
            description="Compare yearly income and property tax between two states and project what the yearly difference would grow into if invested.",
            inputSchema={
                "type": "object",
                "properties": {
                    "stateA": {"type": "string", "description": "Current state (default IL)"},
                    "stateB": {"type": "string", "description": "State being considered (default FL)"},
                    "income": {**MONEY, "description": "Gross yearly income (default 100000)"},
                    "homeValue": {**MONEY, "description": "Home value (default 450000)"},
                    "filingStatus": FILING_STATUS,
                    "yearsInvested": {"type": "integer", "description": "Years to invest the difference, 1-50 (default 40)"},
                    "annualReturn": ANNUAL_RETURN,
                },
                "required": []
            }
        ),
        Tool(
            name="estimate_contributions",
            description="Estimate employee and employer Social Security (OASDI) contributions for each working year.",
            inputSchema={
                "type": "object",
                "properties": {
                    "income": WORK_HISTORY_PROPERTIES["income"],
                    "startYear": {"type": "integer", "description": "First year worked"},
                    "yearsWorked": WORK_HISTORY_PROPERTIES["yearsWorked"],
                },
                "required": ["income", "startYear", "yearsWorked"]
            }
        ),
        Tool(
            name="estimate_benefit",
            description="Estimate the monthly Social Security benefit at age 67: AIME, bend-point PIA and cost-of-living adjustments.",
            inputSchema={
                "type": "object",
                "properties": WORK_HISTORY_PROPERTIES,
                "required": ["income", "birthYear"]
            }
        ),
        Tool(
            name="project_investment",
            description="Project a fixed monthly contribution compounding monthly at an annual return.",
            inputSchema={
                "type": "object",
                "properties": {
                    "monthlyContribution": MONEY,
                    "months": {"type": "integer", "description": "Number of monthly contributions"},
                    "annualReturn": ANNUAL_RETURN,
                    "startYear": {"type": "integer", "description": "Calendar year of month 0 (default current year)"},
                },
                "required": ["monthlyContribution", "months"]
            }
        ),
        Tool(
            name="project_drawdown",
            description="Project a balance drawn down by a fixed monthly withdrawal; reports whether it survives the horizon.",
            inputSchema={
                "type": "object",
                "properties": {
                    "startingBalance": MONEY,
                    "monthlyWithdrawal": MONEY,
                    "months": {"type": "integer", "description": "Horizon in months"},
                    "annualReturn": ANNUAL_RETURN,
                    "startYear": {"type": "integer", "description": "Calendar year of month 0 (default current year)"},
                },
                "required": ["startingBalance", "monthlyWithdrawal", "months"]
            }
        ),
        Tool(
            name="social_security_projection",
            description="Contributions, estimated benefit, and what the same contributions would grow into if invested and then drawn down by the benefit.",
            inputSchema={
                "type": "object",
                "properties": WORK_HISTORY_PROPERTIES,
                "required": ["income", "birthYear"]
            }
        ),
        Tool(
            name="list_programs",
            description="List all saved scenarios (folders in input-parameters) and which sections they define.",
            inputSchema={"type": "object", "properties": {}, "required": []}
        ),
        Tool(
            name="reload_programs",
            description="Reload all scenarios from disk. Use this after adding, modifying, or removing spec.json files.",
            inputSchema={"type": "object", "properties": {}, "required": []}
        ),
        Tool(
            name="run_program",
            description="Run a saved scenario's state comparison and Social Security sections.",
            inputSchema={
                "type": "object",
                "properties": {"program": PROGRAM_PARAM},
                "required": []
            }
        ),
    ]


@server.call_tool()
async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Handle tool calls."""
    try:
        tt_tools = get_tools()
        calculators = tt_tools.calculators

        if name == "list_states":
            result = calculators.list_states()
        elif name == "estimate_state_tax":
            result = calculators.estimate_state_tax(arguments)
        elif name == "compare_states":
            result = calculators.compare_states(arguments)
        elif name == "estimate_contributions":
            result = calculators.estimate_contributions(arguments)
        elif name == "estimate_benefit":
            result = calculators.estimate_benefit(arguments)
        elif name == "project_investment":
            result = calculators.project_investment(arguments)
        elif name == "project_drawdown":
            result = calculators.project_drawdown(arguments)
        elif name == "social_security_projection":
            result = calculators.social_security_projection(arguments)
        elif name == "list_programs":
            result = tt_tools.list_programs()
        elif name == "reload_programs":
            result = tt_tools.reload_programs()
        elif name == "run_program":
            result = tt_tools.run_program(arguments.get("program"))
        else:
            result = {"error": f"Unknown tool: {name}"}

        return [TextContent(
            type="text",
            text=json.dumps(result, indent=2, default=str)
        )]
    except Exception as e:
        return [TextContent(
            type="text",
            text=json.dumps({"error": str(e)}, indent=2)
        )]


async def main():
    """Run the MCP server."""
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


if __name__ == "__main__":
    asyncio.run(main())
