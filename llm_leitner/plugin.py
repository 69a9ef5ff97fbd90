from typing import Any

from . import deck as deck_io
from .flashcards import AnswerDifficulty, HistoryEntry
from .hints import get_hint
from .progress import compute_progress
from .scheduler import get_bucket_range, practice, to_bucket_sets, update

try:
    import llm  # type: ignore
    hookimpl = llm.hookimpl  # type: ignore
except ImportError:
    import pluggy
    hookimpl = pluggy.HookimplMarker("llm")


def _load(path: str) -> deck_io.Deck:
    import click

    try:
        return deck_io.load_deck(path)
    except ValueError as e:
        raise click.ClickException(str(e))


@hookimpl  # type: ignore[misc]
def register_commands(cli: Any) -> None:
    import click

    deck_argument = click.argument("deck_path", default=lambda: deck_io.DECK_PATH, required=False)

    @cli.command("leitner-due")  # type: ignore[misc]
    @deck_argument
    @click.option("--day", type=click.IntRange(min=0), default=0, help="Day number, starting at 0")
    def due(deck_path: str, day: int) -> None:
        """List the cards due for review on a given day."""
        deck = _load(deck_path)
        due_cards = practice(to_bucket_sets(deck.buckets), day)
        if not due_cards:
            click.echo(f"🎉 Nothing due on day {day}!")
            return

        click.echo(f"{len(due_cards)} card(s) due on day {day}:")
        for i, card in enumerate(deck.cards):
            if card in due_cards:
                click.echo(f"  [{i}] {get_hint(card)}  (bucket {deck.bucket_of(card)})")

    @cli.command("leitner-range")  # type: ignore[misc]
    @deck_argument
    def bucket_range(deck_path: str) -> None:
        """Show the lowest and highest occupied bucket."""
        deck = _load(deck_path)
        result = get_bucket_range(to_bucket_sets(deck.buckets))
        if result is None:
            click.echo("No cards in any bucket.")
        else:
            click.echo(f"Buckets {result.min_bucket}-{result.max_bucket}")

    @cli.command("leitner-review")  # type: ignore[misc]
    @click.option("--deck", "deck_path", default=lambda: deck_io.DECK_PATH, help="Deck file (defaults to $LEITNER_DECK)")
    @click.argument("card_index", type=int)
    @click.argument("difficulty", type=click.Choice([d.value for d in AnswerDifficulty], case_sensitive=False))
    @click.option("--json", "as_json", is_flag=True, help="Print the updated deck as JSON instead of a summary")
    def review(deck_path: str, card_index: int, difficulty: str, as_json: bool) -> None:
        """Record an answer for one card. The deck file itself is never modified."""
        deck = _load(deck_path)
        if not 0 <= card_index < len(deck.cards):
            raise click.ClickException(f"No card at index {card_index} (deck has {len(deck.cards)} cards)")

        card = deck.cards[card_index]
        answer = AnswerDifficulty(difficulty.lower())
        before = deck.bucket_of(card)
        deck.buckets = update(deck.buckets, card, answer)
        deck.history.append(HistoryEntry(card=card, difficulty=answer))

        if as_json:
            click.echo(deck_io.dump_deck(deck))
        else:
            click.echo(f"Card {card_index}: bucket {before} -> {deck.bucket_of(card)}")

    @cli.command("leitner-progress")  # type: ignore[misc]
    @deck_argument
    def progress(deck_path: str) -> None:
        """Show learning progress for a deck."""
        deck = _load(deck_path)
        report = compute_progress(deck.buckets, deck.history)
        click.echo(f"Total cards: {report.total_cards}")
        for bucket, count in report.cards_by_bucket.items():
            click.echo(f"  Bucket {bucket}: {count}")
        click.echo(f"Success rate: {report.success_rate * 100:.1f}%")
        if report.hardest_cards:
            click.echo("Hardest cards:")
            for card in report.hardest_cards:
                click.echo(f"  {card.front} → {card.back}")
