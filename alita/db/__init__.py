"""Stores for per-chat and per-user records, backed by MongoDB or memory, and a stats summary."""