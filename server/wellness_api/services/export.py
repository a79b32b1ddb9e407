"""Plain-text export of everything a user has recorded."""
from datetime import datetime
from typing import Iterable

from mood_insights import mood_label

from ..models import AISummary, ChatMessage, DiaryEntry, MoodLog, Profile

RULE = "=" * 60


def export_filename(generated_at: datetime) -> str:
    return f"wellness-export-{generated_at.date().isoformat()}.txt"


def _section(title: str, count: int) -> list[str]:
    return ["", RULE, f"{title} ({count})", RULE]


def build_export(
    profile: Profile,
    moods: Iterable[MoodLog],
    entries: Iterable[DiaryEntry],
    messages: Iterable[ChatMessage],
    summaries: Iterable[AISummary],
    generated_at: datetime,
) -> str:
    """Render the user's data as a readable text document."""
    moods, entries, messages, summaries = list(moods), list(entries), list(messages), list(summaries)

    lines = [
        "Wellness Journal Export",
        f"Generated: {generated_at.strftime('%Y-%m-%d %H:%M UTC')}",
        "",
        f"Name: {profile.name}",
        f"Email: {profile.email}",
    ]
    if profile.location:
        lines.append(f"Location: {profile.location}")
    if profile.bio:
        lines.append(f"Bio: {profile.bio}")
    lines.append(f"Member since: {profile.created_at.date().isoformat()}")

    lines += _section("Mood Logs", len(moods))
    for mood in moods:
        line = f"{mood.date.isoformat()}  {mood.emoji} {mood_label(mood.emoji)}"
        if mood.note:
            line += f" - {mood.note}"
        lines.append(line)

    lines += _section("Diary Entries", len(entries))
    for entry in entries:
        header = f"{entry.created_at.strftime('%Y-%m-%d %H:%M')}  {entry.title}"
        if entry.mood:
            header += f" [{entry.mood}]"
        lines += ["", header, f"({entry.word_count} words)", entry.content]

    lines += _section("Chat Messages", len(messages))
    for message in messages:
        speaker = "You" if message.sender == "user" else "Assistant"
        lines.append(f"{message.timestamp.strftime('%Y-%m-%d %H:%M')}  {speaker}: {message.content}")

    lines += _section("AI Summaries", len(summaries))
    for summary in summaries:
        lines += ["", f"{summary.created_at.strftime('%Y-%m-%d %H:%M')}  ({summary.period})", summary.summary]

    return "\n".join(lines) + "\n"
