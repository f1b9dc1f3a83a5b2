"""Allow ``python -m xmltract``."""

from xmltract.cli import app

app(prog_name="xmltract")
