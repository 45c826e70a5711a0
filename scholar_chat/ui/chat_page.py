"""NiceGUI chat page and floating chat widget."""

import logging
from collections.abc import Callable

from nicegui import Client, events, ui

from scholar_chat.gateway.client import get_gateway
from scholar_chat.models.schemas import Speaker, Turn
from scholar_chat.session.controller import SessionController
from scholar_chat.ui.shell import PageShell, WidgetShell

logger = logging.getLogger(__name__)

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: #f5f5f5; }

    .header { background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); }

    .message-user {
        background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
        color: white;
        border-radius: 18px 18px 4px 18px;
    }

    .message-assistant {
        background: #f3f4f6;
        color: #1f2937;
        border-radius: 18px 18px 18px 4px;
    }

    .avatar-user { background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); }
    .avatar-assistant { background: #6b7280; }

    .typing-dot {
        width: 8px; height: 8px;
        background: #667eea;
        border-radius: 50%;
        animation: bounce 1.4s infinite ease-in-out;
    }
    .typing-dot:nth-child(2) { animation-delay: 0.2s; }
    .typing-dot:nth-child(3) { animation-delay: 0.4s; }

    @keyframes bounce {
        0%, 60%, 100% { transform: translateY(0); }
        30% { transform: translateY(-6px); }
    }

    .chat-widget { width: 380px; height: 540px; }
    .chat-widget.minimized { height: auto; }
</style>
"""

# Only plain Enter is intercepted; Shift+Enter keeps the browser newline at the cursor.
ENTER_KEY_HANDLER = """(e) => {
    if (e.key === 'Enter' && !e.shiftKey) {
        e.preventDefault();
        emit({key: e.key, shiftKey: e.shiftKey});
    }
}"""


def new_controller(scope: str | None = None) -> SessionController:
    """Create an isolated session for one page visit."""
    gateway = get_gateway()
    return SessionController(gateway, scope, timeout=gateway.timeout)


def follow_session(
    controller: SessionController, client: Client, callback: Callable[[], None]
) -> None:
    """Refresh a client on session changes until the client is deleted.

    Disconnects are not enough to stop: the browser may reconnect to the
    same client and must keep receiving updates.
    """
    client.on_delete(controller.subscribe(callback))


def render_avatar(is_user: bool) -> None:
    css = "avatar-user" if is_user else "avatar-assistant"
    icon = "person" if is_user else "smart_toy"
    with ui.element("div").classes(
        f"w-9 h-9 rounded-full flex items-center justify-center shrink-0 {css}"
    ):
        ui.icon(icon).classes("text-white text-lg")


def render_turn(turn: Turn) -> None:
    is_user = turn.speaker is Speaker.USER
    align = "justify-end" if is_user else "justify-start"
    bubble = "message-user" if is_user else "message-assistant"

    with ui.row().classes(f"w-full {align} gap-3 items-end no-wrap"):
        if not is_user:
            render_avatar(False)
        with ui.column().classes("max-w-[75%] gap-1"):
            with ui.element("div").classes(f"px-4 py-3 {bubble}"):
                if is_user:
                    ui.label(turn.text).classes("text-sm whitespace-pre-wrap")
                else:
                    ui.markdown(turn.text).classes("text-sm leading-relaxed")
            ui.label(turn.created_at.astimezone().strftime("%I:%M %p")).classes(
                f"text-[10px] text-gray-400 {'self-end' if is_user else 'self-start'}"
            )
        if is_user:
            render_avatar(True)


def render_composing() -> None:
    """Typing indicator shown while a request is outstanding. Never stored."""
    with ui.row().classes("w-full justify-start gap-3 items-end"):
        render_avatar(False)
        with ui.element("div").classes("message-assistant px-4 py-3"):
            with ui.row().classes("gap-1"):
                for _ in range(3):
                    ui.element("div").classes("typing-dot")


def build_conversation(shell: PageShell, placeholder: str) -> None:
    """Render the message list and input box for a shell."""
    controller = shell.controller

    @ui.refreshable
    def messages() -> None:
        for turn in shell.visible_turns:
            render_turn(turn)
        if shell.suggestions and not shell.show_composing:
            with ui.row().classes("w-full gap-2 pl-12"):
                for prompt in shell.suggestions:
                    ui.button(
                        prompt,
                        on_click=lambda p=prompt: controller.select_suggestion(p),
                    ).props("outline rounded dense no-caps size=sm")
        if shell.show_composing:
            render_composing()

    with ui.scroll_area().classes("flex-grow w-full bg-gray-50") as scroll:
        with ui.column().classes("w-full p-4 gap-4"):
            messages()

    def on_change() -> None:
        messages.refresh()
        scroll.scroll_to(percent=1.0)

    follow_session(controller, ui.context.client, on_change)

    async def send() -> None:
        await controller.submit(controller.draft)

    async def on_key(e: events.GenericEventArguments) -> None:
        await controller.handle_key(e.args["key"], shift=e.args["shiftKey"])

    with ui.row().classes("w-full p-3 gap-3 items-end bg-white border-t no-wrap"):
        (
            ui.textarea(placeholder=placeholder)
            .props("autogrow borderless dense rows=1")
            .classes("flex-grow")
            .bind_value(controller, "draft")
            .bind_enabled_from(controller, "is_submitting", backward=lambda busy: not busy)
            .on("keydown", on_key, js_handler=ENTER_KEY_HANDLER)
        )
        (
            ui.button(icon="send", on_click=send)
            .props("round unelevated")
            .bind_enabled_from(
                controller,
                "draft",
                backward=lambda text: bool(text.strip()) and not controller.is_submitting,
            )
        )


def chat_widget(paper_id: str | None = None) -> WidgetShell:
    """Add the floating assistant widget to the current page."""
    shell = WidgetShell(new_controller(paper_id))

    with ui.page_sticky(position="bottom-right", x_offset=24, y_offset=24):
        (
            ui.button(icon="smart_toy", on_click=shell.open)
            .props("round size=lg")
            .bind_visibility_from(shell, "is_open", backward=lambda is_open: not is_open)
        )
        with (
            ui.card()
            .classes("chat-widget p-0 gap-0 overflow-hidden")
            .bind_visibility_from(shell, "is_open") as card
        ):
            with ui.row().classes("w-full header px-4 py-2 items-center justify-between no-wrap"):
                with ui.row().classes("items-center gap-2"):
                    ui.icon("smart_toy").classes("text-white text-xl")
                    ui.label("Intelligent Assistant").classes("text-white font-semibold")
                with ui.row().classes("gap-1"):

                    def toggle() -> None:
                        shell.toggle_minimized()
                        if shell.is_minimized:
                            card.classes(add="minimized")
                        else:
                            card.classes(remove="minimized")

                    ui.button(icon="remove", on_click=toggle).props("flat round dense color=white")
                    ui.button(icon="close", on_click=shell.close).props(
                        "flat round dense color=white"
                    )
            with ui.column().classes("w-full flex-grow gap-0").bind_visibility_from(
                shell, "show_messages"
            ):
                build_conversation(shell, "Type your message...")

    return shell


@ui.page("/")
def chat_page() -> None:
    """Full-page assistant."""
    ui.add_head_html(CUSTOM_CSS)
    shell = PageShell(new_controller())

    with ui.column().classes("w-full max-w-3xl mx-auto bg-white rounded-xl shadow").style(
        "height: calc(100vh - 4rem); margin-top: 2rem"
    ):
        with ui.row().classes("w-full header px-5 py-4 items-center gap-3 rounded-t-xl"):
            ui.icon("smart_toy").classes("text-white text-3xl")
            with ui.column().classes("gap-0"):
                ui.label("Intelligent Assistant").classes("text-lg font-semibold text-white")
                ui.label("Your companion to explore scientific knowledge").classes(
                    "text-xs text-white/80"
                )
        build_conversation(shell, "Type your message here...")


@ui.page("/papers/{paper_id}")
def paper_page(paper_id: str) -> None:
    """Paper view hosting the assistant widget scoped to the paper."""
    ui.add_head_html(CUSTOM_CSS)
    logger.debug(f"Opening paper view {paper_id!r}")
    with ui.column().classes("w-full max-w-4xl mx-auto p-8"):
        ui.label(f"Paper {paper_id}").classes("text-2xl font-semibold")
    chat_widget(paper_id)


def main() -> None:
    ui.run(title="Scholar Chat", port=8080, reload=False)


if __name__ == "__main__":
    main()
