"""
Parsers for runtime environment lists of ``KEY=VALUE`` entries.
"""
from typing import Dict, Iterable, Optional

class EnvParser:
    """
    Parser for environment lists as reported by container and image inspection.
    """
    @staticmethod
    def parse_list(entries: Optional[Iterable[str]]) -> Dict[str, str]:
        """
        Parses an environment list into a mapping.

        The key is everything before the first ``=`` and the value is the remainder,
        so ``A=b=c`` yields ``{'A': 'b=c'}``. Entries without ``=`` are dropped.

        Args:
            entries (Iterable[str]): Entries such as ``["PATH=/usr/bin", "DEBUG=1"]``.

        Returns:
            Dict[str, str]: Dictionary of environment variables.
        """
        env = {}
        for entry in entries or []:
            if '=' not in entry:
                continue
            key, value = entry.split('=', 1)
            env[key] = value
        return env
