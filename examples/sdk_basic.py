#!/usr/bin/env python3
"""
Basic SDK usage examples for the WorqHat client.

Demonstrates common AI calls using the Python SDK. Set WORQHAT_API_KEY
before running.
"""

import asyncio
from pathlib import Path

from worqhat import APIError, InvalidInputError, WorqHatClient


async def content_generation(client: WorqHatClient):
    """Ask AiCon v2 a question."""
    print("=== Content Generation ===")

    result = await client.ai.content_generation.v2(
        question="What is the capital of France?",
        randomness=0.4,
    )
    print(f"✓ Answer: {result.get('content')}")


async def streamed_content(client: WorqHatClient):
    """Stream an AiCon v3 answer chunk by chunk."""
    print("\n=== Streaming Content ===")

    stream = await client.ai.content_generation.v3(
        question="Write a haiku about the sea",
        stream_data=True,
    )
    async for chunk in stream:
        print(chunk, end="", flush=True)
    print()


async def image_generation(client: WorqHatClient):
    """Generate a landscape image."""
    print("\n=== Image Generation ===")

    result = await client.ai.image_generation.v3(
        prompt="A lighthouse at dusk, oil painting",
        orientation="landscape",
    )
    print(f"✓ Image: {result.get('image')}")


async def search(client: WorqHatClient):
    """Search the web with AlphaSearch."""
    print("\n=== Search ===")

    result = await client.ai.search.v3(question="Latest Python release", search_count=5)
    print(f"✓ Results: {result.get('content')}")


async def speech_to_text(client: WorqHatClient):
    """Transcribe a local audio file."""
    print("\n=== Speech Extraction ===")

    audio = Path("sample.mp3")
    if not audio.exists():
        print("❌ File not found: sample.mp3")
        return

    result = await client.ai.text_extraction.speech(audio=audio)
    print(f"✓ Transcript: {result.get('data')}")


async def error_handling(client: WorqHatClient):
    """Demonstrate error handling."""
    print("\n=== Error Handling ===")

    try:
        await client.ai.content_generation.v2(question="")
    except InvalidInputError as e:
        print(f"✓ Caught expected error: {e}")

    try:
        await client.ai.moderation.content(text_content="hello")
    except APIError as e:
        print(f"✓ Remote failure envelope: {e.to_dict()}")


def sync_example():
    """Use the client from synchronous code."""
    print("\n=== Sync API ===")

    client = WorqHatClient()
    result = client.check_authentication_sync()
    print(f"✓ Authenticated: {result}")


async def main():
    """Run all basic examples."""
    print("WorqHat SDK - Basic Examples")
    print("=" * 40)

    async with WorqHatClient() as client:
        await content_generation(client)
        await streamed_content(client)
        await image_generation(client)
        await search(client)
        await speech_to_text(client)
        await error_handling(client)

    print("\n✓ All examples completed!")


if __name__ == "__main__":
    asyncio.run(main())
    sync_example()
