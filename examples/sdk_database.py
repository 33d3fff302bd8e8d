#!/usr/bin/env python3
"""
Document database examples for the WorqHat client.
"""

import asyncio

from worqhat import WorqHatClient


async def main():
    async with WorqHatClient() as client:
        db = client.db
        users = db.collection("users")

        print(await users.create({"name": "string", "age": "number", "tags": "array"}))

        await users.doc("alice").add({"name": "Alice", "age": 30, "tags": ["admin"]})
        await users.doc("alice").update(
            {
                "tags": db.array_add(["editor"]),
                "age": db.increment(1),
                "name": "Alice B.",
            }
        )

        adults = await users.where("age", ">=", 18).join("and").order_by("age", "desc").limit(10).get()
        print(f"✓ Adults: {adults}")

        answer = await users.language("how many users are admins?").get()
        print(f"✓ Natural query: {answer}")

        unique = await users.get_unique("age").order_by("age").execute()
        print(f"✓ Unique ages: {unique}")

        print(await users.get_count("name"))
        await users.doc("alice").delete()


if __name__ == "__main__":
    asyncio.run(main())
