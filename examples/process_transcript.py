#!/usr/bin/env python3
"""
Example: Push a sales call transcript into HubSpot.

This script demonstrates:
1. Extracting contacts, deal and follow-ups from a transcript
2. Syncing contacts and the deal to HubSpot
3. Attaching the call note, and building the follow-up export links

Prerequisites:
    - Set environment variables:
        OPENAI_API_KEY=your_key
        HUBSPOT_ACCESS_TOKEN=pat-...
        HUBSPOT_PORTAL_ID=your_portal_id

Usage:
    python examples/process_transcript.py [path/to/transcript.txt]
"""

import asyncio
import sys
from pathlib import Path

# Add src to path for imports
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

from dotenv import load_dotenv

# Load environment variables
env_file = Path(__file__).parent.parent / '.env'
if env_file.exists():
    load_dotenv(env_file)

from transcript_crm.config import config
from transcript_crm.exports import build_exports
from transcript_crm.models.payload import TranscriptPayload
from transcript_crm.pipeline import TranscriptProcessor


SAMPLE_TRANSCRIPT = """
Sarah (Merch Co): Thanks for joining, Jordan. Let's talk about the spring drop.

Jordan Lee (Northwind Studios): Great. We're thinking 500 hoodies and 300 mugs,
mostly in forest green. Budget is around fifteen thousand.

Sarah: Perfect. I'll send over a proposal with mockups by Friday.

Jordan: Sounds good. Loop in our designer, Priya, at priya@northwind.example.
My email is jordan@northwind.example.
"""


async def main():
    """Run one transcript through the processor and print the outcome."""
    print("=" * 60)
    print("Transcript to HubSpot Example")
    print("=" * 60)

    missing = config.validate()
    if missing:
        print(f"ERROR: missing configuration: {', '.join(missing)}")
        return

    transcript = SAMPLE_TRANSCRIPT
    if len(sys.argv) > 1:
        transcript = Path(sys.argv[1]).read_text(encoding='utf-8')

    payload = TranscriptPayload(
        transcript=transcript,
        title="Northwind - Spring Drop",
        attendees=["jordan@northwind.example"],
    )

    processor = TranscriptProcessor.from_env()

    try:
        result = await processor.process(payload)

        print(f"\nSuccess: {result.success}")
        print(f"  Summary: {result.extracted.call_summary}")

        print("\n  Contacts:")
        for contact in result.hubspot.contacts:
            print(f"    - [{contact.action}] {contact.name or contact.email}: {contact.url}")

        if result.hubspot.deal:
            deal = result.hubspot.deal
            print(f"\n  Deal [{deal.action}]: {deal.url}")

        print(f"\n  Note added: {result.hubspot.note_added}")

        if result.errors:
            print("\n  Errors:")
            for error in result.errors:
                print(f"    - {error}")

        if result.success:
            exports = build_exports(result.extracted)
            print("\n" + "-" * 60)
            print("Follow-up exports")
            print("-" * 60)
            print(exports['description'])
            print(f"\n  Email draft: {exports['email']}")
            if exports['jira']:
                print(f"  Jira: {exports['jira']}")

    finally:
        await processor.close()
        print("\nConnections closed.")


if __name__ == "__main__":
    asyncio.run(main())
