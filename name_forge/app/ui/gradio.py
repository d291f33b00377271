"""User interface assembly for the Gradio front-end."""

from __future__ import annotations

from typing import TYPE_CHECKING, Tuple

import gradio as gr

from name_forge.core import NameForgeError, NameGenOptions

from ..services.result_formatter import NameResultFormatter, gender_text

_RESULT_COLUMNS = ("name", "gender", "gender_label", "segments")

if TYPE_CHECKING:
    from ..app import NameForgeApp


def create_interface(app: "NameForgeApp") -> gr.Blocks:
    """Construct the interactive Gradio Blocks UI."""

    formatter = NameResultFormatter()

    def generate_interface(
        length: float,
        amount: int,
        gender_ratio: float,
        omit_reserved: bool,
    ) -> Tuple[str, list]:
        options = NameGenOptions(
            length=float(length),
            amount=int(amount),
            gender_ratio=float(gender_ratio),
            omit_reserved=bool(omit_reserved),
        )
        try:
            names = app.generate(options)
        except NameForgeError as exc:
            return f"Generation failed: {exc}", []
        rows = [[row[column] for column in _RESULT_COLUMNS] for row in formatter.as_rows(names)]
        return formatter.format_results(names), rows

    def reload_interface() -> str:
        try:
            app.reload()
        except NameForgeError as exc:
            return f"Reload failed: {exc}"
        return formatter.format_summary(app.summary())

    with gr.Blocks(title="NameForge - Troll Name Generator", theme=gr.themes.Soft()) as interface:
        gr.Markdown("## Troll Name Generator")
        summary_md = gr.Markdown(formatter.format_summary(app.summary()))
        reload_btn = gr.Button("Reload Data")

        with gr.Row():
            length = gr.Slider(minimum=1.0, maximum=4.0, value=1.0, step=0.1, label="Length")
            amount = gr.Slider(minimum=1, maximum=50, value=10, step=1, label="Amount")
        with gr.Row():
            gender = gr.Slider(
                minimum=0.0,
                maximum=1.0,
                value=0.5,
                step=0.05,
                label="Gender (female → male)",
            )
            gender_label = gr.Markdown(gender_text(0.5))
        omit_reserved = gr.Checkbox(value=True, label="Omit reserved (jin, fon, zul, zen)")
        generate_btn = gr.Button("Generate Names", variant="primary")

        results_md = gr.Markdown()
        results_df = gr.Dataframe(
            headers=list(_RESULT_COLUMNS),
            label="Generated names",
            wrap=True,
        )

        gender.change(fn=gender_text, inputs=gender, outputs=gender_label)
        reload_btn.click(fn=reload_interface, outputs=summary_md)
        generate_btn.click(
            fn=generate_interface,
            inputs=[length, amount, gender, omit_reserved],
            outputs=[results_md, results_df],
        )

    return interface


__all__ = ["create_interface"]
