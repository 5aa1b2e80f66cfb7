"""Shared chat export fixtures."""

import zipfile

import pytest

LONG_MESSAGE = " ".join(["word"] * 60)

WHATSAPP_TRANSCRIPT = "\n".join([
    "[1/2/23, 10:00:00 AM] Alice: hi there",
    "[1/2/23, 10:01:00 AM] Bob: hello Alice, how are you doing today",
    "this line wraps onto a second line",
    "",
    "[1/2/23, 10:02:00 AM] Alice: \u200eimage omitted",
    "[1/2/23, 10:03:00 AM] Bob: sticker omitted",
    "[1/2/23, 10:04:00 AM] Bob: Voice call, call time 5:23",
    "[1/2/23, 10:05:00 AM] Alice: Missed voice call",
    f"[1/2/23, 10:06:00 AM] Alice: {LONG_MESSAGE}",
])

TELEGRAM_HTML = """<!DOCTYPE html>
<html>
<head><meta charset="utf-8"/><title>Exported Data</title></head>
<body>
<div class="page_wrap">
<div class="page_header"><div class="content"><div class="text bold">Alice</div></div></div>
<div class="page_body chat_page">
<div class="history">
<div class="message service" id="message-1"><div class="body details">2 January 2023</div></div>
<div class="message default clearfix outgoing" id="message1">
 <div class="body">
  <div class="pull_right date details" title="02.01.2023 10:00:00 UTC+01:00">10:00</div>
  <div class="from_name">Bob</div>
  <div class="text">hi there Alice</div>
 </div>
</div>
<div class="message default clearfix" id="message2">
 <div class="body">
  <div class="pull_right date details" title="02.01.2023 10:01:00 UTC+01:00">10:01</div>
  <div class="from_name">Alice</div>
  <div class="text">hey</div>
 </div>
</div>
<div class="message default clearfix joined" id="message3">
 <div class="body">
  <div class="pull_right date details" title="02.01.2023 10:02:00 UTC+01:00">10:02</div>
  <div class="media_wrap clearfix">
   <a class="photo_wrap clearfix pull_left" href="photos/photo_1.jpg"><img class="photo" src="photos/photo_1_thumb.jpg"/></a>
  </div>
 </div>
</div>
<div class="message default clearfix" id="message4">
 <div class="body">
  <div class="pull_right date details" title="02.01.2023 10:03:00 UTC+01:00">10:03</div>
  <div class="from_name">Alice</div>
  <div class="media_wrap clearfix">
   <a class="sticker_wrap clearfix pull_left" href="stickers/sticker.webp"><img class="sticker" src="stickers/sticker.webp_thumb.jpg"/></a>
  </div>
 </div>
</div>
<div class="message default clearfix outgoing" id="message5">
 <div class="body">
  <div class="pull_right date details" title="02.01.2023 10:04:00 UTC+01:00">10:04</div>
  <div class="from_name">Bob</div>
  <div class="media_wrap clearfix">
   <div class="media clearfix pull_left media_call success">
    <div class="body"><div class="title bold">Outgoing call</div><div class="status details">5:23</div></div>
   </div>
  </div>
 </div>
</div>
<div class="message default clearfix" id="message6">
 <div class="body">
  <div class="pull_right date details" title="02.01.2023 10:05:00 UTC+01:00">10:05</div>
  <div class="from_name">Alice</div>
  <div class="media_wrap clearfix">
   <div class="media clearfix pull_left media_call success">
    <div class="body"><div class="title bold">Incoming call</div><div class="status details">1:00</div></div>
   </div>
  </div>
 </div>
</div>
</div>
</div>
</div>
<div class="footer">Exported by Telegram Desktop</div>
</body>
</html>
"""


@pytest.fixture
def whatsapp_transcript():
    return WHATSAPP_TRANSCRIPT


@pytest.fixture
def telegram_html():
    return TELEGRAM_HTML


@pytest.fixture
def make_zip(tmp_path):
    """Write a zip archive with the given {entry name: text} members."""

    def _make(entries, name="WhatsApp Chat - Alice.zip"):
        path = tmp_path / name
        with zipfile.ZipFile(path, "w") as archive:
            for entry_name, text in entries.items():
                archive.writestr(entry_name, text)
        return path

    return _make


@pytest.fixture
def whatsapp_zip(make_zip, whatsapp_transcript):
    return make_zip({
        "_chat.txt": whatsapp_transcript,
        "00000012-PHOTO-2023-01-02-10-02-00.jpg": "fake image bytes",
    })


@pytest.fixture
def telegram_file(tmp_path, telegram_html):
    path = tmp_path / "messages.html"
    path.write_text(telegram_html, encoding="utf-8")
    return path
