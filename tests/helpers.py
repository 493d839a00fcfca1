from django.contrib.messages import get_messages


def message_texts(request):
    return [str(m) for m in get_messages(request)]
