"""
Run script for the entity recognition engine.

Reads:
  - recognition_io/input.txt  (or the path given as first argument)

Produces:
  - recognition_io/recognition_result.json
"""
import json
import logging
import sys
from pathlib import Path

from azner.config import settings

# ---------------------------------------------------------------------------
# Setup logging
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger("run_recognition")

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
ROOT = Path(__file__).parent
IO_DIR = ROOT / "recognition_io"

INPUT_FILE = Path(sys.argv[1]) if len(sys.argv) > 1 else IO_DIR / "input.txt"
OUTPUT_FILE = IO_DIR / "recognition_result.json"

# ---------------------------------------------------------------------------
# Load input (raw bytes: malformed UTF-8 is scanned as-is)
# ---------------------------------------------------------------------------
logger.info("Loading input: %s", INPUT_FILE)
raw = INPUT_FILE.read_bytes()
logger.info("input size        : %d bytes", len(raw))

# ---------------------------------------------------------------------------
# Recognition + validation
# ---------------------------------------------------------------------------
from azner.entity_extraction.pipeline import build_recognition_report
from azner.postprocessing.validation import validate_recognition_report

report = build_recognition_report(raw)
validation = validate_recognition_report(report)
if not validation.valid:
    logger.error("Report validation failed: %s", validation.errors)
    sys.exit(1)

meta = report["processing_metadata"]
logger.info("Recognition completed in %d ms", meta["recognition_duration_ms"])
logger.info("Candidates        : %d", meta["candidates_found"])
logger.info("Entities          : %d", meta["entities_recognized"])

# ---------------------------------------------------------------------------
# Save output
# ---------------------------------------------------------------------------
IO_DIR.mkdir(exist_ok=True)
with open(OUTPUT_FILE, "w", encoding="utf-8") as f:
    json.dump(report, f, ensure_ascii=False, indent=2)

logger.info("Output saved to: %s", OUTPUT_FILE)

# ---------------------------------------------------------------------------
# Summary
# ---------------------------------------------------------------------------
print("\n" + "=" * 70)
print("RECOGNITION RESULT — SUMMARY")
print("=" * 70)
print(f"engine      : {meta['engine_version']}")
print(f"input       : {meta['input_bytes']} bytes")

for type_name, count in sorted(meta["entities_by_type"].items()):
    print(f"  {type_name:14s} {count}")

if report["entities"]:
    print(f"\nEntities ({len(report['entities'])}):")
    for e in report["entities"]:
        flag = " (labeled)" if e["labeled"] else ""
        print(f"  [{e['start']:>6d},{e['end']:>6d}) {e['type']:14s} → {e['text']}{flag}")

if validation.warnings:
    print(f"\nWarning: {validation.warnings}")

print("=" * 70 + "\n")
