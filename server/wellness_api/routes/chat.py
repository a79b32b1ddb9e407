"""Wellness chat API routes."""
from fastapi import APIRouter, Depends

from ..dependencies import get_chat_store
from ..models.chat import ChatExchange, ChatMessage, ChatMessageCreate
from ..services.auth import Session, require_session
from ..services.chat_responder import reply_to
from ..stores import ChatStore

router = APIRouter(prefix="/api/chat", tags=["Chat"])


@router.post("/messages", response_model=ChatExchange, status_code=201)
async def send_message(
    body: ChatMessageCreate,
    session: Session = Depends(require_session),
    chats: ChatStore = Depends(get_chat_store),
):
    """Store the user's message and the assistant's reply."""
    message = chats.create(session.user_id, body.content, "user")
    reply = chats.create(session.user_id, reply_to(body.content), "ai")
    return ChatExchange(message=message, reply=reply)


@router.get("/messages", response_model=list[ChatMessage])
async def chat_history(
    session: Session = Depends(require_session),
    chats: ChatStore = Depends(get_chat_store),
):
    return chats.list_for_user(session.user_id)
