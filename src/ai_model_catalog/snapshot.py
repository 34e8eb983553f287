"""Compiled-in model catalog snapshot.

This is the last fallback tier used when neither the network source nor the
disk cache can provide a catalog. The table uses the same raw document shape
as the live source so it goes through the same ingestion path.

Regenerate with ``python -m ai_model_catalog.scripts.sync_snapshot``.
"""

from typing import Any, Dict

SNAPSHOT_CATALOG_DATA: Dict[str, Dict[str, Any]] = {
    "anthropic": {
        "models": {
            "claude-3-5-haiku-20241022": {
                "name": "Claude Haiku 3.5",
                "release_date": "2024-10-22",
                "last_updated": "2024-10-22",
                "reasoning": False,
                "tool_call": True,
            },
            "claude-3-5-haiku-latest": {
                "name": "Claude Haiku 3.5 (latest)",
                "release_date": "2024-10-22",
                "last_updated": "2024-10-22",
                "reasoning": False,
                "tool_call": True,
            },
            "claude-3-5-sonnet-20240620": {
                "name": "Claude Sonnet 3.5",
                "release_date": "2024-06-20",
                "last_updated": "2024-06-20",
                "reasoning": False,
                "tool_call": True,
            },
            "claude-3-5-sonnet-20241022": {
                "name": "Claude Sonnet 3.5 v2",
                "release_date": "2024-10-22",
                "last_updated": "2024-10-22",
                "reasoning": False,
                "tool_call": True,
            },
            "claude-3-7-sonnet-20250219": {
                "name": "Claude Sonnet 3.7",
                "release_date": "2025-02-19",
                "last_updated": "2025-02-19",
                "reasoning": True,
                "tool_call": True,
            },
            "claude-3-7-sonnet-latest": {
                "name": "Claude Sonnet 3.7 (latest)",
                "release_date": "2025-02-19",
                "last_updated": "2025-02-19",
                "reasoning": True,
                "tool_call": True,
            },
            "claude-3-haiku-20240307": {
                "name": "Claude Haiku 3",
                "release_date": "2024-03-13",
                "last_updated": "2024-03-13",
                "reasoning": False,
                "tool_call": True,
            },
            "claude-3-opus-20240229": {
                "name": "Claude Opus 3",
                "release_date": "2024-02-29",
                "last_updated": "2024-02-29",
                "reasoning": False,
                "tool_call": True,
            },
            "claude-3-sonnet-20240229": {
                "name": "Claude Sonnet 3",
                "release_date": "2024-03-04",
                "last_updated": "2024-03-04",
                "reasoning": False,
                "tool_call": True,
            },
            "claude-haiku-4-5": {
                "name": "Claude Haiku 4.5 (latest)",
                "release_date": "2025-10-15",
                "last_updated": "2025-10-15",
                "reasoning": True,
                "tool_call": True,
            },
            "claude-haiku-4-5-20251001": {
                "name": "Claude Haiku 4.5",
                "release_date": "2025-10-15",
                "last_updated": "2025-10-15",
                "reasoning": True,
                "tool_call": True,
            },
            "claude-opus-4-0": {
                "name": "Claude Opus 4 (latest)",
                "release_date": "2025-05-22",
                "last_updated": "2025-05-22",
                "reasoning": True,
                "tool_call": True,
            },
            "claude-opus-4-1": {
                "name": "Claude Opus 4.1 (latest)",
                "release_date": "2025-08-05",
                "last_updated": "2025-08-05",
                "reasoning": True,
                "tool_call": True,
            },
            "claude-opus-4-1-20250805": {
                "name": "Claude Opus 4.1",
                "release_date": "2025-08-05",
                "last_updated": "2025-08-05",
                "reasoning": True,
                "tool_call": True,
            },
            "claude-opus-4-20250514": {
                "name": "Claude Opus 4",
                "release_date": "2025-05-22",
                "last_updated": "2025-05-22",
                "reasoning": True,
                "tool_call": True,
            },
            "claude-opus-4-5": {
                "name": "Claude Opus 4.5 (latest)",
                "release_date": "2025-11-24",
                "last_updated": "2025-11-24",
                "reasoning": True,
                "tool_call": True,
            },
            "claude-opus-4-5-20251101": {
                "name": "Claude Opus 4.5",
                "release_date": "2025-11-01",
                "last_updated": "2025-11-01",
                "reasoning": True,
                "tool_call": True,
            },
            "claude-opus-4-6": {
                "name": "Claude Opus 4.6",
                "release_date": "2026-02-05",
                "last_updated": "2026-02-05",
                "reasoning": True,
                "tool_call": True,
            },
            "claude-sonnet-4-0": {
                "name": "Claude Sonnet 4 (latest)",
                "release_date": "2025-05-22",
                "last_updated": "2025-05-22",
                "reasoning": True,
                "tool_call": True,
            },
            "claude-sonnet-4-20250514": {
                "name": "Claude Sonnet 4",
                "release_date": "2025-05-22",
                "last_updated": "2025-05-22",
                "reasoning": True,
                "tool_call": True,
            },
            "claude-sonnet-4-5": {
                "name": "Claude Sonnet 4.5 (latest)",
                "release_date": "2025-09-29",
                "last_updated": "2025-09-29",
                "reasoning": True,
                "tool_call": True,
            },
            "claude-sonnet-4-5-20250929": {
                "name": "Claude Sonnet 4.5",
                "release_date": "2025-09-29",
                "last_updated": "2025-09-29",
                "reasoning": True,
                "tool_call": True,
            },
        },
    },
    "openai": {
        "models": {
            "codex-mini-latest": {
                "name": "Codex Mini",
                "release_date": "2025-05-16",
                "last_updated": "2025-05-16",
                "reasoning": True,
                "tool_call": True,
            },
            "gpt-3.5-turbo": {
                "name": "GPT-3.5-turbo",
                "release_date": "2023-03-01",
                "last_updated": "2023-11-06",
                "reasoning": False,
                "tool_call": False,
            },
            "gpt-4": {
                "name": "GPT-4",
                "release_date": "2023-11-06",
                "last_updated": "2024-04-09",
                "reasoning": False,
                "tool_call": True,
            },
            "gpt-4-turbo": {
                "name": "GPT-4 Turbo",
                "release_date": "2023-11-06",
                "last_updated": "2024-04-09",
                "reasoning": False,
                "tool_call": True,
            },
            "gpt-4.1": {
                "name": "GPT-4.1",
                "release_date": "2025-04-14",
                "last_updated": "2025-04-14",
                "reasoning": False,
                "tool_call": True,
            },
            "gpt-4.1-mini": {
                "name": "GPT-4.1 mini",
                "release_date": "2025-04-14",
                "last_updated": "2025-04-14",
                "reasoning": False,
                "tool_call": True,
            },
            "gpt-4.1-nano": {
                "name": "GPT-4.1 nano",
                "release_date": "2025-04-14",
                "last_updated": "2025-04-14",
                "reasoning": False,
                "tool_call": True,
            },
            "gpt-4o": {
                "name": "GPT-4o",
                "release_date": "2024-05-13",
                "last_updated": "2024-08-06",
                "reasoning": False,
                "tool_call": True,
            },
            "gpt-4o-2024-05-13": {
                "name": "GPT-4o (2024-05-13)",
                "release_date": "2024-05-13",
                "last_updated": "2024-05-13",
                "reasoning": False,
                "tool_call": True,
            },
            "gpt-4o-2024-08-06": {
                "name": "GPT-4o (2024-08-06)",
                "release_date": "2024-08-06",
                "last_updated": "2024-08-06",
                "reasoning": False,
                "tool_call": True,
            },
            "gpt-4o-2024-11-20": {
                "name": "GPT-4o (2024-11-20)",
                "release_date": "2024-11-20",
                "last_updated": "2024-11-20",
                "reasoning": False,
                "tool_call": True,
            },
            "gpt-4o-mini": {
                "name": "GPT-4o mini",
                "release_date": "2024-07-18",
                "last_updated": "2024-07-18",
                "reasoning": False,
                "tool_call": True,
            },
            "gpt-5": {
                "name": "GPT-5",
                "release_date": "2025-08-07",
                "last_updated": "2025-08-07",
                "reasoning": True,
                "tool_call": True,
            },
            "gpt-5-chat-latest": {
                "name": "GPT-5 Chat (latest)",
                "release_date": "2025-08-07",
                "last_updated": "2025-08-07",
                "reasoning": True,
                "tool_call": False,
            },
            "gpt-5-codex": {
                "name": "GPT-5-Codex",
                "release_date": "2025-09-15",
                "last_updated": "2025-09-15",
                "reasoning": True,
                "tool_call": True,
            },
            "gpt-5-mini": {
                "name": "GPT-5 Mini",
                "release_date": "2025-08-07",
                "last_updated": "2025-08-07",
                "reasoning": True,
                "tool_call": True,
            },
            "gpt-5-nano": {
                "name": "GPT-5 Nano",
                "release_date": "2025-08-07",
                "last_updated": "2025-08-07",
                "reasoning": True,
                "tool_call": True,
            },
            "gpt-5-pro": {
                "name": "GPT-5 Pro",
                "release_date": "2025-10-06",
                "last_updated": "2025-10-06",
                "reasoning": True,
                "tool_call": True,
            },
            "gpt-5.1": {
                "name": "GPT-5.1",
                "release_date": "2025-11-13",
                "last_updated": "2025-11-13",
                "reasoning": True,
                "tool_call": True,
            },
            "gpt-5.1-chat-latest": {
                "name": "GPT-5.1 Chat",
                "release_date": "2025-11-13",
                "last_updated": "2025-11-13",
                "reasoning": True,
                "tool_call": True,
            },
            "gpt-5.1-codex": {
                "name": "GPT-5.1 Codex",
                "release_date": "2025-11-13",
                "last_updated": "2025-11-13",
                "reasoning": True,
                "tool_call": True,
            },
            "gpt-5.1-codex-max": {
                "name": "GPT-5.1 Codex Max",
                "release_date": "2025-11-13",
                "last_updated": "2025-11-13",
                "reasoning": True,
                "tool_call": True,
            },
            "gpt-5.1-codex-mini": {
                "name": "GPT-5.1 Codex mini",
                "release_date": "2025-11-13",
                "last_updated": "2025-11-13",
                "reasoning": True,
                "tool_call": True,
            },
            "gpt-5.2": {
                "name": "GPT-5.2",
                "release_date": "2025-12-11",
                "last_updated": "2025-12-11",
                "reasoning": True,
                "tool_call": True,
            },
            "gpt-5.2-chat-latest": {
                "name": "GPT-5.2 Chat",
                "release_date": "2025-12-11",
                "last_updated": "2025-12-11",
                "reasoning": True,
                "tool_call": True,
            },
            "gpt-5.2-codex": {
                "name": "GPT-5.2 Codex",
                "release_date": "2025-12-11",
                "last_updated": "2025-12-11",
                "reasoning": True,
                "tool_call": True,
            },
            "gpt-5.2-pro": {
                "name": "GPT-5.2 Pro",
                "release_date": "2025-12-11",
                "last_updated": "2025-12-11",
                "reasoning": True,
                "tool_call": True,
            },
            "gpt-5.3-codex": {
                "name": "GPT-5.3 Codex",
                "release_date": "2026-02-05",
                "last_updated": "2026-02-05",
                "reasoning": True,
                "tool_call": True,
            },
            "gpt-5.3-codex-spark": {
                "name": "GPT-5.3 Codex Spark",
                "release_date": "2026-02-05",
                "last_updated": "2026-02-05",
                "reasoning": True,
                "tool_call": True,
            },
            "o1": {
                "name": "o1",
                "release_date": "2024-12-05",
                "last_updated": "2024-12-05",
                "reasoning": True,
                "tool_call": True,
            },
            "o1-mini": {
                "name": "o1-mini",
                "release_date": "2024-09-12",
                "last_updated": "2024-09-12",
                "reasoning": True,
                "tool_call": False,
            },
            "o1-preview": {
                "name": "o1-preview",
                "release_date": "2024-09-12",
                "last_updated": "2024-09-12",
                "reasoning": True,
                "tool_call": False,
            },
            "o1-pro": {
                "name": "o1-pro",
                "release_date": "2025-03-19",
                "last_updated": "2025-03-19",
                "reasoning": True,
                "tool_call": True,
            },
            "o3": {
                "name": "o3",
                "release_date": "2025-04-16",
                "last_updated": "2025-04-16",
                "reasoning": True,
                "tool_call": True,
            },
            "o3-deep-research": {
                "name": "o3-deep-research",
                "release_date": "2024-06-26",
                "last_updated": "2024-06-26",
                "reasoning": True,
                "tool_call": True,
            },
            "o3-mini": {
                "name": "o3-mini",
                "release_date": "2024-12-20",
                "last_updated": "2025-01-29",
                "reasoning": True,
                "tool_call": True,
            },
            "o3-pro": {
                "name": "o3-pro",
                "release_date": "2025-06-10",
                "last_updated": "2025-06-10",
                "reasoning": True,
                "tool_call": True,
            },
            "o4-mini": {
                "name": "o4-mini",
                "release_date": "2025-04-16",
                "last_updated": "2025-04-16",
                "reasoning": True,
                "tool_call": True,
            },
            "o4-mini-deep-research": {
                "name": "o4-mini-deep-research",
                "release_date": "2024-06-26",
                "last_updated": "2024-06-26",
                "reasoning": True,
                "tool_call": True,
            },
            "text-embedding-3-large": {
                "name": "text-embedding-3-large",
                "release_date": "2024-01-25",
                "last_updated": "2024-01-25",
                "reasoning": False,
                "tool_call": False,
            },
            "text-embedding-3-small": {
                "name": "text-embedding-3-small",
                "release_date": "2024-01-25",
                "last_updated": "2024-01-25",
                "reasoning": False,
                "tool_call": False,
            },
            "text-embedding-ada-002": {
                "name": "text-embedding-ada-002",
                "release_date": "2022-12-15",
                "last_updated": "2022-12-15",
                "reasoning": False,
                "tool_call": False,
            },
        },
    },
    "google": {
        "models": {
            "gemini-1.5-flash": {
                "name": "Gemini 1.5 Flash",
                "release_date": "2024-05-14",
                "last_updated": "2024-05-14",
                "reasoning": False,
                "tool_call": True,
            },
            "gemini-1.5-flash-8b": {
                "name": "Gemini 1.5 Flash-8B",
                "release_date": "2024-10-03",
                "last_updated": "2024-10-03",
                "reasoning": False,
                "tool_call": True,
            },
            "gemini-1.5-pro": {
                "name": "Gemini 1.5 Pro",
                "release_date": "2024-02-15",
                "last_updated": "2024-02-15",
                "reasoning": False,
                "tool_call": True,
            },
            "gemini-2.0-flash": {
                "name": "Gemini 2.0 Flash",
                "release_date": "2024-12-11",
                "last_updated": "2024-12-11",
                "reasoning": False,
                "tool_call": True,
            },
            "gemini-2.0-flash-lite": {
                "name": "Gemini 2.0 Flash Lite",
                "release_date": "2024-12-11",
                "last_updated": "2024-12-11",
                "reasoning": False,
                "tool_call": True,
            },
            "gemini-2.5-flash": {
                "name": "Gemini 2.5 Flash",
                "release_date": "2025-03-20",
                "last_updated": "2025-06-05",
                "reasoning": True,
                "tool_call": True,
            },
            "gemini-2.5-flash-image": {
                "name": "Gemini 2.5 Flash Image",
                "release_date": "2025-08-26",
                "last_updated": "2025-08-26",
                "reasoning": True,
                "tool_call": False,
            },
            "gemini-2.5-flash-image-preview": {
                "name": "Gemini 2.5 Flash Image (Preview)",
                "release_date": "2025-08-26",
                "last_updated": "2025-08-26",
                "reasoning": True,
                "tool_call": False,
            },
            "gemini-2.5-flash-lite": {
                "name": "Gemini 2.5 Flash Lite",
                "release_date": "2025-06-17",
                "last_updated": "2025-06-17",
                "reasoning": True,
                "tool_call": True,
            },
            "gemini-2.5-flash-lite-preview-06-17": {
                "name": "Gemini 2.5 Flash Lite Preview 06-17",
                "release_date": "2025-06-17",
                "last_updated": "2025-06-17",
                "reasoning": True,
                "tool_call": True,
            },
            "gemini-2.5-flash-lite-preview-09-2025": {
                "name": "Gemini 2.5 Flash Lite Preview 09-25",
                "release_date": "2025-09-25",
                "last_updated": "2025-09-25",
                "reasoning": True,
                "tool_call": True,
            },
            "gemini-2.5-flash-preview-04-17": {
                "name": "Gemini 2.5 Flash Preview 04-17",
                "release_date": "2025-04-17",
                "last_updated": "2025-04-17",
                "reasoning": True,
                "tool_call": True,
            },
            "gemini-2.5-flash-preview-05-20": {
                "name": "Gemini 2.5 Flash Preview 05-20",
                "release_date": "2025-05-20",
                "last_updated": "2025-05-20",
                "reasoning": True,
                "tool_call": True,
            },
            "gemini-2.5-flash-preview-09-2025": {
                "name": "Gemini 2.5 Flash Preview 09-25",
                "release_date": "2025-09-25",
                "last_updated": "2025-09-25",
                "reasoning": True,
                "tool_call": True,
            },
            "gemini-2.5-flash-preview-tts": {
                "name": "Gemini 2.5 Flash Preview TTS",
                "release_date": "2025-05-01",
                "last_updated": "2025-05-01",
                "reasoning": False,
                "tool_call": False,
            },
            "gemini-2.5-pro": {
                "name": "Gemini 2.5 Pro",
                "release_date": "2025-03-20",
                "last_updated": "2025-06-05",
                "reasoning": True,
                "tool_call": True,
            },
            "gemini-2.5-pro-preview-05-06": {
                "name": "Gemini 2.5 Pro Preview 05-06",
                "release_date": "2025-05-06",
                "last_updated": "2025-05-06",
                "reasoning": True,
                "tool_call": True,
            },
            "gemini-2.5-pro-preview-06-05": {
                "name": "Gemini 2.5 Pro Preview 06-05",
                "release_date": "2025-06-05",
                "last_updated": "2025-06-05",
                "reasoning": True,
                "tool_call": True,
            },
            "gemini-2.5-pro-preview-tts": {
                "name": "Gemini 2.5 Pro Preview TTS",
                "release_date": "2025-05-01",
                "last_updated": "2025-05-01",
                "reasoning": False,
                "tool_call": False,
            },
            "gemini-3-flash-preview": {
                "name": "Gemini 3 Flash Preview",
                "release_date": "2025-12-17",
                "last_updated": "2025-12-17",
                "reasoning": True,
                "tool_call": True,
            },
            "gemini-3-pro-preview": {
                "name": "Gemini 3 Pro Preview",
                "release_date": "2025-11-18",
                "last_updated": "2025-11-18",
                "reasoning": True,
                "tool_call": True,
            },
            "gemini-embedding-001": {
                "name": "Gemini Embedding 001",
                "release_date": "2025-05-20",
                "last_updated": "2025-05-20",
                "reasoning": False,
                "tool_call": False,
            },
            "gemini-flash-latest": {
                "name": "Gemini Flash Latest",
                "release_date": "2025-09-25",
                "last_updated": "2025-09-25",
                "reasoning": True,
                "tool_call": True,
            },
            "gemini-flash-lite-latest": {
                "name": "Gemini Flash-Lite Latest",
                "release_date": "2025-09-25",
                "last_updated": "2025-09-25",
                "reasoning": True,
                "tool_call": True,
            },
            "gemini-live-2.5-flash": {
                "name": "Gemini Live 2.5 Flash",
                "release_date": "2025-09-01",
                "last_updated": "2025-09-01",
                "reasoning": True,
                "tool_call": True,
            },
            "gemini-live-2.5-flash-preview-native-audio": {
                "name": "Gemini Live 2.5 Flash Preview Native Audio",
                "release_date": "2025-06-17",
                "last_updated": "2025-09-18",
                "reasoning": True,
                "tool_call": True,
            },
        },
    },
}
