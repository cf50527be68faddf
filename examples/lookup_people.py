#!/usr/bin/env python3
"""
Example: People Lookup

Searches WikiData for a name, then fetches one person by Q-number.
Requires network access to query.wikidata.org.
"""

import asyncio
import logging

from wikiperson import PersonNotFoundError, WikiDataClient


async def demo_lookup():
    """Search for a name and look up Elvis Presley (Q303)."""
    print("=" * 50)
    print("  Example: WikiData People Lookup")
    print("=" * 50)
    print()

    async with WikiDataClient() as client:
        people = await client.search_by_name("Pope")
        print(f"Search 'Pope': {len(people)} match(es)")
        for person in people:
            print(f"  {person.qid}: {person}")
        print()

        elvis = await client.get_by_id(303)
        print(f"Q303: {elvis}")
        print(f"  {elvis.description}")
        print(f"  {elvis.link}")
        print()

        try:
            await client.get_by_id(999999999)
        except PersonNotFoundError as e:
            print(f"Q999999999: {e}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    asyncio.run(demo_lookup())
