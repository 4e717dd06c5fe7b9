"""
Runs one email body through the safe renderer.

Reads:
  - samples/sample_email.html  (or the path given as first argument)

Writes:
  - samples/sample_email.view.json  (EmailView.to_dict())
"""
import json
import logging
import sys
from pathlib import Path

from safe_email.config import settings

# ---------------------------------------------------------------------------
# Setup logging
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger("run_extraction")

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
ROOT = Path(__file__).parent
INPUT_FILE = Path(sys.argv[1]) if len(sys.argv) > 1 else ROOT / "samples" / "sample_email.html"
OUTPUT_FILE = INPUT_FILE.with_suffix(".view.json")

# ---------------------------------------------------------------------------
# Load input
# ---------------------------------------------------------------------------
logger.info("Loading email body from %s", INPUT_FILE)
email_body = INPUT_FILE.read_text(encoding="utf-8")

# ---------------------------------------------------------------------------
# Render
# ---------------------------------------------------------------------------
from safe_email.extraction.validation import validate_email_view
from safe_email.models.view_io import RenderRequest
from safe_email.presentation.adapter import EmailViewAdapter, ViewState

adapter = EmailViewAdapter()
request = RenderRequest(emailBody=email_body, subject=INPUT_FILE.stem)

view = adapter.render(request.to_content())
presentation = adapter.present(request, ViewState())

validation = validate_email_view(view)
if not validation.valid:
    logger.error("Extraction output invalid: %s", validation.errors)
for warning in validation.warnings:
    logger.warning("%s", warning)

# ---------------------------------------------------------------------------
# Save output
# ---------------------------------------------------------------------------
with open(OUTPUT_FILE, "w", encoding="utf-8") as f:
    json.dump(view.to_dict(), f, ensure_ascii=False, indent=2)

logger.info("Output saved to: %s", OUTPUT_FILE)

# ---------------------------------------------------------------------------
# Summary
# ---------------------------------------------------------------------------
extracted = view.extracted

print("\n" + "=" * 70)
print("SAFE EMAIL RENDER — SUMMARY")
print("=" * 70)
print(f"sanitized html : {len(view.sanitized_html)} chars")
print(f"items          : {presentation['itemCount']}")

for section in presentation["sections"]:
    state = "expanded" if section["expanded"] else "collapsed"
    print(f"\n[{section['title']}] ({state})")
    if section["key"] == "signature":
        info = section["items"]
        for key in ("name", "title", "address"):
            if info[key]:
                print(f"  {key:8s} → {info[key]}")
        for phone in info["phones"]:
            print(f"  phone    → {phone['display']}")
        if info["email"]:
            print(f"  email    → {info['email']['display']}")
    else:
        for item in section["items"]:
            print(f"  {item.get('display') or item.get('src')}")

if extracted.contact_info:
    print(f"\nContacts ({len(extracted.contact_info)}):")
    for contact in extracted.contact_info:
        print(f"  {contact.kind:8s} → {contact.value}")

print("=" * 70)
print(f"Output: {OUTPUT_FILE}")
print("=" * 70 + "\n")
