#!/usr/bin/env python3
"""Output formatting utilities."""

from datetime import datetime
from typing import List, Optional
from models.file_entry import FileEntry
from models.server_info import ServerInfo, VolumeInfo
from models.share_link import ShareLink

SIZE_UNITS = ['Bytes', 'KB', 'MB', 'GB', 'TB', 'PB', 'EB', 'ZB', 'YB']


def format_bytes(size: float, decimals: int = 2) -> str:
    """Format a byte count with binary units, dropping trailing zeros.

    >>> format_bytes(1073741824)
    '1 GB'
    >>> format_bytes(1536)
    '1.5 KB'
    """
    if not size:
        return '0 Bytes'

    decimals = max(decimals, 0)
    scaled = float(size)
    index = 0
    while abs(scaled) >= 1024 and index < len(SIZE_UNITS) - 1:
        scaled /= 1024
        index += 1

    value = f"{scaled:.{decimals}f}"
    if '.' in value:
        value = value.rstrip('0').rstrip('.')
    return f"{value} {SIZE_UNITS[index]}"


def format_timestamp(epoch: Optional[float]) -> str:
    if not isinstance(epoch, (int, float)):
        return "Unknown"
    return datetime.fromtimestamp(epoch).strftime("%Y-%m-%d %H:%M:%S")


def format_listing(path: str, entries: List[FileEntry]) -> str:
    """Format a folder listing, one ``[DIR]``/``[FILE]`` line per entry."""
    output = f"Items in {path}:\n"
    for entry in entries:
        output += f"{entry.type_marker} {entry.name}\n"
    if not entries:
        output += "(empty)\n"
    return output


def format_search_results(keyword: str, path: str, entries: List[FileEntry]) -> str:
    output = f'Search results for "{keyword}" in {path}:\n'
    for entry in entries:
        output += f"{entry.type_marker} {entry.path}\n"
    if not entries:
        output += "No results found.\n"
    return output


def format_share_links(path: str, links: List[ShareLink]) -> str:
    output = f"Share links for {path}:\n"
    matching = [link for link in links if link.path == path]
    for link in matching:
        output += f"URL: {link.url}\n"
        expires = link.expires_at
        output += f"Expires: {expires}\n" if expires else "No expiration date\n"
    if not matching:
        output += "No share links found.\n"
    return output


def format_server_info(info: ServerInfo) -> str:
    output = "Synology Server Information:\n"
    output += f"Hostname: {info.hostname}\n"
    output += f"DSM Version: {info.version}\n"
    output += f"Time: {format_timestamp(info.time)}\n"
    output += "Filesystem support:\n"
    for name, supported in info.protocols:
        output += f"  - {name}: {'Yes' if supported else 'No'}\n"
    return output


def format_quota_info(volumes: List[VolumeInfo], volume_name: Optional[str] = None) -> str:
    """Format storage volumes, optionally restricted to one volume name."""
    output = "Storage Volume Information:\n"
    selected = [v for v in volumes if not volume_name or v.name == volume_name]

    for volume in selected:
        output += f"Volume: {volume.name}\n"
        output += f"  - Status: {volume.status}\n"
        output += f"  - File System: {volume.filesystem}\n"
        output += f"  - Total Size: {format_bytes(volume.total_size)}\n"
        output += f"  - Used: {format_bytes(volume.used_size)} ({volume.used_percent}%)\n"
        output += f"  - Free: {format_bytes(volume.free_size)}\n"

    if not selected:
        if volume_name:
            output += f"No volume named {volume_name} found.\n"
        else:
            output += "No volumes found.\n"
    return output
