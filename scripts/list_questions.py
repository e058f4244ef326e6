#!/usr/bin/env python3
"""Print one page of the question list, with Logfire error tracking."""

import argparse
import asyncio
import sys

import logfire

from ask.application.usecase.question import (
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
)
from ask.config import Settings
from ask.domain.value import FilterMode
from ask.util.di.container import create_container
from ask.util.logging import setup_logging
from ask.util.observability import configure_logfire


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="List forum questions")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in FilterMode],
        default=FilterMode.NONE.value,
    )
    parser.add_argument("--query", default="")
    parser.add_argument("--page", type=int, default=1)
    return parser.parse_args(argv)


def render(response: ListQuestionsResponse) -> str:
    lines = []
    for question in response.questions:
        tags = ", ".join(question.tag_names) or "-"
        lines.append(
            f"[{question.score:+d}] {question.title} "
            f"({question.answer_count} answers, {question.views} views, "
            f"{question.age}) [{tags}]"
        )
    if not lines:
        lines.append("No questions found")

    tokens = " ".join(str(token) for token in response.page.tokens)
    lines.append(
        f"Page {response.page.current_page}/{response.page.total_pages}: {tokens}"
    )
    return "\n".join(lines)


async def run(args: argparse.Namespace) -> ListQuestionsResponse:
    container = create_container()
    try:
        async with container() as request_container:
            use_case = await request_container.get(ListQuestionsUseCase)
            return await use_case.execute(
                ListQuestionsRequest(
                    mode=FilterMode(args.mode), query=args.query, page=args.page
                )
            )
    finally:
        await container.close()


def main(argv: list[str] | None = None) -> int:
    """List questions and log any failure to Logfire."""
    settings = Settings()

    # Configure Logfire early to catch startup errors
    setup_logging(settings)
    configure_logfire(settings)

    args = parse_args(argv)

    try:
        logfire.info("Listing questions", mode=args.mode, page=args.page)
        response = asyncio.run(run(args))
        print(render(response))
        return 0

    except Exception as e:
        logfire.error(
            "Question listing failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
