"""NiceGUI chat page. Renders ConversationState snapshots and forwards input."""

from collections.abc import Awaitable, Callable

from nicegui import ui

from psti_chat.conversation import ConversationState, QuickReply
from psti_chat.gateway import BackendGateway
from psti_chat.models.schemas import ConversationSnapshot, Message, Sender

CUSTOM_CSS = """
<style>
    body { background: #eef2f7; min-height: 100vh; }

    .chat-wrapper {
        background: white;
        border-radius: 12px;
        box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
        overflow: hidden;
    }

    .header { background: linear-gradient(135deg, #1e3a8a 0%, #2563eb 100%); }

    .message-user {
        background: #2563eb;
        color: white;
        border-radius: 18px 18px 4px 18px;
        white-space: pre-wrap;
    }

    .message-bot {
        background: #f3f4f6;
        color: #1f2937;
        border-radius: 18px 18px 18px 4px;
        white-space: pre-wrap;
    }

    .typing-dot {
        width: 8px; height: 8px;
        background: #2563eb;
        border-radius: 50%;
        animation: bounce 1.4s infinite ease-in-out;
    }
    .typing-dot:nth-child(2) { animation-delay: 0.2s; }
    .typing-dot:nth-child(3) { animation-delay: 0.4s; }

    @keyframes bounce {
        0%, 60%, 100% { transform: translateY(0); }
        30% { transform: translateY(-6px); }
    }
</style>
"""

WELCOME_TITLE = "Selamat Datang di Chatbot PSTI!"
WELCOME_SUBTITLE = (
    "Halo! Saya siap membantu menjawab pertanyaan seputar Lab PSTI, project, "
    "fasilitas, dan informasi lainnya. Silakan pilih topik di bawah atau ketik "
    "pertanyaan Anda."
)


def new_conversation(gateway: BackendGateway) -> ConversationState:
    """Start a conversation that identifies itself with the configured user id."""
    return ConversationState(gateway, user_id=gateway.settings.user_id)


def register_chat_page(gateway: BackendGateway) -> None:
    """Register the "/" page. Every client gets its own conversation."""

    @ui.page("/")
    async def chat_page() -> None:
        ui.add_head_html(CUSTOM_CSS)
        state = new_conversation(gateway)

        messages_container: ui.column
        scroll_area: ui.scroll_area
        status_label: ui.label
        input_field: ui.textarea
        send_btn: ui.button
        quick_buttons: list[ui.button] = []

        def render_avatar(sender: Sender) -> None:
            ui.label("👤" if sender is Sender.USER else "🤖").classes("text-2xl")

        def render_message(msg: Message) -> None:
            is_user = msg.sender is Sender.USER
            align = "justify-end" if is_user else "justify-start"

            with ui.row().classes(f"w-full {align} gap-3 items-end no-wrap"):
                if not is_user:
                    render_avatar(msg.sender)
                with ui.column().classes("max-w-[70%] gap-1"):
                    ui.label(msg.text).classes(
                        f"px-4 py-3 text-sm message-{msg.sender.value}"
                    )
                    ui.label(msg.timestamp).classes(
                        f"text-[10px] text-gray-400 {'self-end' if is_user else 'self-start'}"
                    )
                if is_user:
                    render_avatar(msg.sender)

        def render_typing_indicator() -> None:
            with ui.row().classes("w-full justify-start gap-3 items-end"):
                render_avatar(Sender.BOT)
                with ui.element("div").classes("message-bot px-4 py-3"), ui.row().classes("gap-1"):
                    for _ in range(3):
                        ui.element("div").classes("typing-dot")

        def render(snapshot: ConversationSnapshot) -> None:
            messages_container.clear()
            with messages_container:
                if state.is_fresh and not snapshot.pending:
                    with ui.column().classes("w-full items-center gap-2 py-6"):
                        ui.label("🤖").classes("text-5xl")
                        ui.label(WELCOME_TITLE).classes("text-lg font-semibold")
                        ui.label(WELCOME_SUBTITLE).classes(
                            "text-sm text-gray-500 text-center max-w-md"
                        )
                for msg in snapshot.messages:
                    render_message(msg)
                if snapshot.pending:
                    render_typing_indicator()

            for control in (input_field, send_btn, *quick_buttons):
                control.set_enabled(not snapshot.pending)
            scroll_area.scroll_to(percent=1.0)

        async def send_message() -> None:
            text = input_field.value or ""
            if not text.strip() or state.pending:
                return
            input_field.value = ""
            await state.submit(text)

        def quick_reply_handler(reply: QuickReply) -> Callable[[], Awaitable[None]]:
            async def handler() -> None:
                await state.quick_reply(reply)

            return handler

        async def refresh_health() -> None:
            health = await gateway.check_health()
            status_label.set_text("Online" if health.available else "Offline")

        # === UI Layout ===
        with (
            ui.element("div").classes("w-full min-h-screen p-4 md:p-8"),
            ui.column().classes("w-full max-w-3xl mx-auto chat-wrapper gap-0").style(
                "height: calc(100vh - 4rem)"
            ),
        ):
            # Header
            with ui.row().classes("w-full header px-5 py-4 items-center justify-between"):
                ui.label("🤖 Chatbot PSTI").classes("text-lg font-semibold text-white")
                status_label = ui.label("...").classes(
                    "text-xs text-white bg-white/20 rounded-full px-3 py-1"
                )

            # Messages
            with ui.scroll_area().classes("flex-grow w-full bg-gray-50") as scroll_area:
                messages_container = ui.column().classes("w-full gap-4 p-5")

            # Quick replies
            with ui.row().classes("w-full px-4 pt-3 gap-2"):
                for reply in QuickReply:
                    quick_buttons.append(
                        ui.button(reply.caption, on_click=quick_reply_handler(reply))
                        .props("outline rounded dense no-caps")
                    )

            # Input
            with ui.row().classes("w-full p-4 gap-3 items-end no-wrap"):
                input_field = (
                    ui.textarea(placeholder="Ketik pesan Anda...")
                    .props("autogrow outlined dense rows=1")
                    .classes("flex-grow")
                    .on("keydown.enter.exact.prevent", send_message)
                )
                send_btn = ui.button(icon="send", on_click=send_message).props(
                    "round unelevated color=primary"
                )
            ui.label("Press Enter to send, Shift + Enter for new line").classes(
                "w-full text-center text-[10px] text-gray-400 pb-2"
            )

        unsubscribe = state.subscribe(render)
        ui.context.client.on_disconnect(unsubscribe)
        render(state.snapshot())
        ui.timer(0.1, refresh_health, once=True)
