"""
Error handling and argument parsing for CLI commands.

Defines CLI-specific exceptions, set argument parsing and rich error output.
"""

import re
import traceback
from typing import List, Optional

import typer
from rich.console import Console

from ..core import pc_from_alpha
from ..exceptions import (
    AlphaParseError,
    ConfigError,
    EmptySetError,
    LengthMismatchError,
    PCSetError,
)
from ..logger import get_cli_logger

console = Console()
logger = get_cli_logger()

EXIT_CODES = {
    "success": 0,
    "general_error": 1,
    "invalid_usage": 2,
    "set_error": 10,
    "config_error": 13
}

_SEPARATORS = re.compile(r'[\s,]+')


class PCSetCLIError(Exception):
    """Base exception for CLI-specific errors."""
    
    def __init__(self, message: str, exit_code: int = 1, suggestions: Optional[list] = None):
        self.message = message
        self.exit_code = exit_code
        self.suggestions = suggestions or []
        super().__init__(message)


class SetParseError(PCSetCLIError):
    """Set argument could not be read."""
    
    def __init__(self, message: str, suggestions: Optional[list] = None):
        super().__init__(message, EXIT_CODES["invalid_usage"], suggestions)


def parse_set(text: str) -> List[int]:
    """
    Parse a set argument such as ``"0,3,5,6,9"`` or ``"1 4 6 7 A"``.
    
    Symbols are separated by commas and/or whitespace and read strictly,
    so a typo is reported instead of becoming pitch class 0.
    """
    tokens = [token for token in _SEPARATORS.split(text.strip()) if token]
    if not tokens:
        raise SetParseError(
            f"No pitch classes in {text!r}",
            suggestions=["Separate pitch classes with commas or spaces: \"0,4,7\""]
        )
    
    try:
        return [pc_from_alpha(token, strict=True) for token in tokens]
    except AlphaParseError as e:
        raise SetParseError(
            str(e),
            suggestions=[
                "Use 0-9 for pitch classes and A, B, C for 10, 11, 12",
                "Separate pitch classes with commas or spaces: \"0,4,7\""
            ]
        ) from e


def _suggestions_for(error: Exception) -> List[str]:
    if hasattr(error, 'suggestions'):
        return list(error.suggestions)
    if isinstance(error, EmptySetError):
        return ["Give at least one pitch class"]
    if isinstance(error, LengthMismatchError):
        return ["Compare sets of the same cardinality"]
    if isinstance(error, ConfigError):
        return ["Check that the config file is a JSON object", "Run: pcset config show"]
    return []


def format_error_message(error: Exception, operation: str, debug: bool = False) -> str:
    """Format error message with context and suggestions."""
    error_type = type(error).__name__
    
    message_parts = [
        f"[red]Error during {operation}:[/red]",
        f"[red]{error_type}: {error}[/red]"
    ]
    
    suggestions = _suggestions_for(error)
    if suggestions:
        message_parts.append("")
        message_parts.append("[yellow]Suggestions:[/yellow]")
        for suggestion in suggestions:
            message_parts.append(f"  • {suggestion}")
    
    if debug:
        message_parts.append("")
        message_parts.append("[dim]Debug information:[/dim]")
        message_parts.append(f"[dim]{traceback.format_exc()}[/dim]")
    
    return "\n".join(message_parts)


def handle_cli_error(error: Exception, operation: str, debug: bool = False) -> None:
    """Handle CLI errors with rich formatting and helpful messages."""
    if isinstance(error, PCSetCLIError):
        exit_code = error.exit_code
    elif isinstance(error, ConfigError):
        exit_code = EXIT_CODES["config_error"]
    elif isinstance(error, PCSetError):
        exit_code = EXIT_CODES["set_error"]
    else:
        exit_code = EXIT_CODES["general_error"]
    
    console.print(format_error_message(error, operation, debug))
    console.print(f"\n[dim]For more help, run: pcset {operation.split()[0]} --help[/dim]")
    
    logger.error(f"CLI error in {operation}: {error}", exc_info=debug)
    
    raise typer.Exit(exit_code)
