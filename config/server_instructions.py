#!/usr/bin/env python3
"""Instructions sent to MCP clients when they initialize a session."""

from dataclasses import dataclass
from typing import List


@dataclass
class ServerInstruction:
    """A single behavioural hint for clients of the server."""
    rule_id: str
    applies_to: List[str]  # Tool names
    instruction: str


DEFAULT_INSTRUCTIONS = [
    ServerInstruction(
        rule_id="absolute_paths",
        applies_to=["list_folders", "get_file", "upload_file", "create_folder",
                    "delete_item", "move_item", "search", "get_share_links"],
        instruction="Paths are absolute File Station paths that start with a shared "
                    "folder, for example '/photos/2024/beach.jpg'."
    ),
    ServerInstruction(
        rule_id="list_before_modify",
        applies_to=["delete_item", "move_item", "upload_file"],
        instruction="List the parent folder first when unsure whether a path exists. "
                    "delete_item removes folders recursively and upload_file overwrites."
    ),
    ServerInstruction(
        rule_id="session_is_automatic",
        applies_to=["login", "logout"],
        instruction="Every tool logs in on demand and renews an expired session, "
                    "so calling login first is optional."
    ),
    ServerInstruction(
        rule_id="search_is_slow",
        applies_to=["search"],
        instruction="search runs a server-side task and waits for it to finish; "
                    "narrow the path to keep it fast."
    ),
]


class ServerInstructions:
    """Renders the instruction list into the text MCP clients receive."""

    def __init__(self, instructions: List[ServerInstruction] = None):
        self.instructions = instructions if instructions is not None else DEFAULT_INSTRUCTIONS

    def render(self) -> str:
        lines = ["Tools for browsing and managing files on a Synology NAS through File Station."]
        for instruction in self.instructions:
            tools = ", ".join(instruction.applies_to)
            lines.append(f"- [{tools}] {instruction.instruction}")
        return "\n".join(lines)


server_instructions = ServerInstructions()
