import asyncio
import mimetypes
from pathlib import Path

import typer

from image_prompter.bootstrap.bootstrapper import bootstrap_prompt_service
from image_prompter.entities.image import UploadedImage
from image_prompter.entities.prompt_mode import PromptMode
from image_prompter.services.PromptService.result_formatter import is_error_outcome

app = typer.Typer(name="image-prompter", help="Generate descriptive prompts from images.")


def _to_uploaded_image(path: Path) -> UploadedImage:
    mime_type, _ = mimetypes.guess_type(path.name)
    return UploadedImage(
        source=path,
        mime_type=mime_type or "application/octet-stream",
        display_handle=str(path),
    )


@app.callback()
def main() -> None:
    """
    Generate descriptive prompts from images.
    """


@app.command()
def generate(
    paths: list[Path] = typer.Argument(None, help="Image files to describe."),
    mode: PromptMode = typer.Option(
        PromptMode.UNIFIED,
        "--mode",
        case_sensitive=False,
        help="UNIFIED for one prompt covering all images, SEPARATE for one per image.",
    ),
    env: str = typer.Option("development", "--env", help="Configuration environment."),
):
    """
    Describe the given images with the generation backend.
    """
    try:
        prompt_service = bootstrap_prompt_service(env=env)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--env") from e

    images = [_to_uploaded_image(path) for path in paths or []]

    outcome = asyncio.run(prompt_service.generate_prompts(images, mode))
    typer.echo(outcome)

    if is_error_outcome(outcome):
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
