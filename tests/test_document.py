from xhtmlbuilder import DOCTYPE, Document, Element, makedocument


def test_empty_document():
    d = Document()
    assert str(d) == (
        "<!DOCTYPE\thtml>"
        "<html\txmlns='http://www.w3.org/1999/xhtml'"
        "\txmlns:xlink='http://www.w3.org/1999/xlink'>"
        "<head><meta\tcharset='UTF-8'/><title></title></head>"
        "<body></body></html>"
    )
    out = str(d)
    assert out.startswith(DOCTYPE)
    assert out.count("<head>") == 1
    assert out.count("<body>") == 1


def test_skeleton():
    d = Document()
    html = d.documentElement
    assert html.tagName == "HTML"
    assert html.children == [d.head, d.body]
    assert d.head.parentElement is html
    assert d.body.parentElement is html
    meta, title = d.head.children
    assert meta.getAttribute("charset") == "UTF-8"
    assert title.tagName == "TITLE"


def test_owner_document():
    d = Document()
    p = d.createElement("p")
    assert isinstance(p, Element)
    assert p.ownerDocument is None
    d.body.append(p)
    assert p.ownerDocument is d
    assert d.documentElement.ownerDocument is d
    p.remove()
    assert p.ownerDocument is None


def test_title():
    d = Document()
    assert d.title == ""
    d.title = "Hello & <you>"
    assert d.title == "Hello & <you>"
    assert "<title>Hello &amp; &lt;you&gt;</title>" in str(d)
    d.title = "again"
    assert d.title == "again"
    assert str(d).count("<title>") == 1


def test_makedocument():
    d = makedocument("Report")
    assert d.title == "Report"
    assert makedocument().title == ""


def test_build_document():
    d = Document()
    ul = d.createElement("ul")
    for n in range(2):
        li = d.createElement("li")
        li.setAttribute("id", f"item{n}")
        li.append(f"item {n}")
        ul.append(li)
    d.body.append(ul, d.createElement("br"))
    assert d.render() == str(d)
    assert d.body.innerHTML == (
        "<ul><li\tid='item0'>item 0</li><li\tid='item1'>item 1</li></ul><br/>"
    )
    assert d.getElementById("item1").textContent == "item 1"
    assert len(d.getElementsByTagName("li")) == 2
