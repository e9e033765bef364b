"""URL routing for the messaging inbox."""

from django.urls import path  # type: ignore

from .views import (
    ClientThreadView,
    ConversationListView,
    MessageCreateView,
    MessageReadView,
    UserThreadView,
)


urlpatterns = [
    path('', MessageCreateView.as_view(), name='message-create'),
    path('conversations/', ConversationListView.as_view(), name='message-conversations'),
    path('users/<int:user_id>/', UserThreadView.as_view(), name='message-user-thread'),
    path('clients/<int:client_id>/', ClientThreadView.as_view(), name='message-client-thread'),
    path('<int:pk>/read/', MessageReadView.as_view(), name='message-read'),
]
