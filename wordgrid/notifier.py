import logging
from collections import defaultdict

import httpx

from wordgrid.generator import PuzzleRecord

logger = logging.getLogger("wordgrid")


def format_message(date_str: str, record: PuzzleRecord, timings: dict, cols: int = 4) -> tuple[str, str]:
    """Build (title, body) for a generated puzzle."""
    by_length: dict[int, int] = defaultdict(int)
    for w in record.all_words:
        by_length[len(w)] += 1

    title = f"Puzzle {date_str} - {len(record.all_words)} words"

    rows = ["".join(record.board[i:i + cols]) for i in range(0, len(record.board), cols)]
    counts = " | ".join(f"{l}L:{n}" for l, n in sorted(by_length.items()))
    longest = ",".join(record.all_words[:5])
    body = "\n".join(rows) + "\n\n" + counts + "\n" + longest
    body += f"\n\nattempts={record.attempts} total={timings.get('total', 0)}ms"
    return title, body


async def send_notification(
    date_str: str,
    record: PuzzleRecord,
    timings: dict,
    topic: str,
    ntfy_url: str = "https://ntfy.sh",
    cols: int = 4,
):
    """Send the generated puzzle summary to ntfy.sh. Best-effort: failures are logged, not raised."""
    try:
        title, body = format_message(date_str, record, timings, cols)

        async with httpx.AsyncClient(timeout=10.0) as client:
            resp = await client.post(
                f"{ntfy_url}/{topic}",
                content=body.encode("utf-8"),
                headers={
                    "Title": title,
                    "Priority": "default",
                    "Tags": "jigsaw",
                },
            )
            resp.raise_for_status()
            logger.info("Notification sent to %s/%s (status %d)", ntfy_url, topic, resp.status_code)

    except Exception as e:
        logger.error("Failed to send notification: %s", e)
