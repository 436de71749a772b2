"""Show configuration command."""

from collections.abc import Iterator
from pathlib import Path

from ..StageResult import StageResult
from .AfflinkConfig import AfflinkConfig


def cmd_show(section: str = "", config_path: str | Path | None = None) -> StageResult:
    """Show configuration section or list all sections.

    Args:
        section: Section name. Empty string lists all section names, otherwise returns specific section.
        config_path: Explicit config file (default: lookup order)
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Loading configuration...")
        try:
            config = AfflinkConfig.load(config_path)
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = str(e)
            result_obj.output = {
                "errors": [str(e)],
                "warnings": [],
                "section": section,
                "content": {},
                "config_path": str(config_path or ""),
            }
            result_obj.success = False
            return

        yield (0.6, "Processing sections...")
        config_dict = config.to_dict()
        available_sections = list(config_dict.keys())
        shown_path = str(config.path) if config.path else ""
        all_warnings = [] if config.path else ["No config file found, showing defaults"]

        if section == "":
            yield (1.0, "Complete")
            result_obj.result = f"Found {len(available_sections)} section(s)"
            result_obj.output = {
                "errors": [],
                "warnings": all_warnings,
                "section": "",
                "content": {"sections": available_sections},
                "config_path": shown_path,
            }
            result_obj.success = True
            return

        if section not in available_sections:
            yield (1.0, "Complete")
            result_obj.result = f"Section '{section}' not found"
            result_obj.output = {
                "errors": [f"Unknown section: {section}"],
                "warnings": all_warnings,
                "section": section,
                "content": {},
                "config_path": shown_path,
            }
            result_obj.success = False
            return

        value = config_dict[section]
        yield (1.0, "Complete")
        result_obj.result = f"Retrieved configuration for '{section}'"
        result_obj.output = {
            "errors": [],
            "warnings": all_warnings,
            "section": section,
            # Scalar sections (site_url) are wrapped so content is always a mapping
            "content": value if isinstance(value, dict) else {section: value},
            "config_path": shown_path,
        }
        result_obj.success = True

    announce = "Listing configuration sections..." if section == "" else f"Showing configuration for section '{section}'..."
    return StageResult(announce=announce, progress_callback=do_work)
