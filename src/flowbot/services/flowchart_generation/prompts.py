"""
Prompt templates shared by every text-generation provider.
"""

from typing import Dict, List


def build_system_prompt(diagram_type: str) -> str:
    """Build the system instruction every provider sees."""
    return f"""You are a professional flowchart / diagram generator.
Given a user description, produce a structured flowchart as **pure JSON** (no markdown, no explanation, no prose, ONLY the JSON object).

The JSON must match this schema exactly:
{{
  "nodes": [
    {{
      "id": "<unique string>",
      "type": "<one of: process | decision | startEnd | inputOutput>",
      "position": {{ "x": <number>, "y": <number> }},
      "data": {{ "label": "<short text>" }}
    }}
  ],
  "edges": [
    {{
      "id": "<unique string>",
      "source": "<node id>",
      "target": "<node id>",
      "label": "<optional text>",
      "animated": true
    }}
  ]
}}

Rules:
- Every diagram MUST start with a "startEnd" node labelled "Start" and end with a "startEnd" node labelled "End".
- Use "process" for action steps (rectangle), "decision" for yes/no questions (diamond), "startEnd" for start/end (oval), "inputOutput" for data I/O (parallelogram).
- Layout: main flow goes top-to-bottom at x=250. Branch left to x=50 and right to x=450. Space nodes ~120px apart vertically.
- Aim for 5-10 nodes: enough detail without clutter.
- Decision nodes MUST have at least two outgoing edges with labels like "Yes"/"No".
- Edge ids should be like "e-<source>-<target>".
- Every edge should have "animated": true.
- Keep node labels concise (max 30 chars).
- Diagram type requested: "{diagram_type}".

Respond with ONLY the JSON object. No markdown fences, no text before or after."""


def build_user_prompt(prompt: str, diagram_type: str) -> str:
    return f"Generate a {diagram_type} diagram for: {prompt}"


def build_messages(prompt: str, diagram_type: str) -> List[Dict[str, str]]:
    """Chat messages for one generation request."""
    return [
        {"role": "system", "content": build_system_prompt(diagram_type)},
        {"role": "user", "content": build_user_prompt(prompt, diagram_type)},
    ]
