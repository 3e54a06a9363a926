from lesson import GreetingHook, RecordingHook, hello_t


def test_greeting_hook(capsys):
    hook = GreetingHook(greeting="Hi", punctuation="!")

    hook("Tim")

    assert capsys.readouterr().out == "Hi Tim!\n"


def test_greeting_hook_as_block(capsys):
    assert hello_t(["Tim", "Tom"], GreetingHook()) == ["Tim", "Tom"]
    assert capsys.readouterr().out == "Hello Tim\nHello Tom\n"


def test_recording_hook():
    hook = RecordingHook()

    hook.on_event(1)
    hook(2)

    assert hook.values == [1, 2]
