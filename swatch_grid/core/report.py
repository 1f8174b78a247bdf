"""Text and JSON dumps of a colour table and its layout plan."""

import json
from typing import Any

from swatch_grid.core.types import LayoutPlan, Present, Row, Table


def format_table(table: Table) -> str:
    """Format the colour table as an indented listing, roles then states."""
    lines = ['Final colour table']
    if not table:
        lines.append('  (empty)')
    for role, states in table.items():
        lines.append(f'  {role}')
        for state, cell in states.items():
            lines.append(f'    {state or "(no state)"}: {cell.ref_id}')
    return '\n'.join(lines)


def format_plan(plan: LayoutPlan) -> str:
    """Summarise the plan: one line per column with its present/absent counts."""
    lines = [f'{len(plan.columns)} columns × {len(plan.roles)} roles']
    for col in plan.columns:
        present = sum(1 for row in col.rows if row.present)
        mark = '' if col.new else ' (existing)'
        lines.append(f'  {col.state}{mark}: {present} colours, {len(col.rows) - present} empty')
    return '\n'.join(lines)


def row_to_dict(row: Row) -> dict[str, Any]:
    """Plain-data form of one grid row. Paints are included as-is."""
    if isinstance(row, Present):
        return {
            'role': row.role,
            'label': row.label,
            'present': True,
            'id': row.cell.ref_id,
            'value': list(row.cell.value),
        }
    return {'role': row.role, 'label': row.label, 'present': False, 'id': None, 'value': None}


def plan_to_dict(plan: LayoutPlan) -> dict[str, Any]:
    return {
        'roles': list(plan.roles),
        'columns': [
            {
                'state': col.state,
                'new': col.new,
                'rows': [row_to_dict(row) for row in col.rows],
            }
            for col in plan.columns
        ],
    }


def table_to_dict(table: Table) -> dict[str, Any]:
    return {
        role: {state: {'id': cell.ref_id, 'value': list(cell.value)} for state, cell in states.items()}
        for role, states in table.items()
    }


def format_json(table: Table, plan: LayoutPlan) -> str:
    """Format table and plan as one JSON document."""
    obj = {
        'table': table_to_dict(table),
        'plan': plan_to_dict(plan),
        'summary': {
            'roles': len(plan.roles),
            'columns': len(plan.columns),
            'rows': plan.row_count,
        },
    }
    return json.dumps(obj, indent=2, default=str)
