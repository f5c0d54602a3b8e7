"""Tests for sitecrew.utils.sanitizer."""

from sitecrew.utils.sanitizer import sanitize_artifact, strip_fences, strip_provenance_comments

PAGE = "<!DOCTYPE html>\n<html>\n<body><h1>Hello</h1></body>\n</html>"


class TestStripFences:
    def test_strip_html_fences(self):
        assert strip_fences(f"```html\n{PAGE}\n```") == PAGE

    def test_strip_plain_fences(self):
        assert strip_fences(f"```\n{PAGE}\n```") == PAGE

    def test_no_fences_returns_stripped(self):
        assert strip_fences(f"  {PAGE}  ") == PAGE

    def test_unclosed_fence_still_stripped(self):
        assert strip_fences(f"```html\n{PAGE}") == PAGE

    def test_inner_backticks_untouched(self):
        text = "<pre>```js\nx()\n```</pre>"
        assert strip_fences(text) == text


class TestStripProvenanceComments:
    def test_markup_comment_removed(self):
        text = "<div><!-- Generated by AI --><p>Hi</p></div>"
        assert strip_provenance_comments(text) == "<div><p>Hi</p></div>"

    def test_multiline_markup_comment_removed(self):
        text = "<div>\n<!--\n  Built with Claude\n-->\n<p>Hi</p></div>"
        assert "Claude" not in strip_provenance_comments(text)
        assert "<p>Hi</p>" in strip_provenance_comments(text)

    def test_block_comment_removed(self):
        text = "body { margin: 0; } /* auto-generated styles */ h1 { color: red; }"
        assert strip_provenance_comments(text) == "body { margin: 0; }  h1 { color: red; }"

    def test_line_comment_removed(self):
        text = "const x = 1; // created by an LLM\nconst y = 2;"
        assert strip_provenance_comments(text) == "const x = 1; \nconst y = 2;"

    def test_case_insensitive(self):
        text = "<p>a</p><!-- made with CHATGPT --><p>b</p>"
        assert strip_provenance_comments(text) == "<p>a</p><p>b</p>"

    def test_unrelated_comments_kept(self):
        text = "<!-- Main navigation -->\n<nav></nav>\n/* Email form */\n// Detail view"
        assert strip_provenance_comments(text) == text

    def test_urls_are_not_line_comments(self):
        text = '<a href="https://ai.example.com/generated">Docs</a>'
        assert strip_provenance_comments(text) == text

    def test_protocol_relative_urls_are_not_line_comments(self):
        script = '<!DOCTYPE html>\n<script src="//cdn.example.com/ai/chat.js"></script>\n<p>Hi</p>'
        style = ".hero{background:url(//img.example.com/ai.png) center;}"
        assert sanitize_artifact(script) == script
        assert sanitize_artifact(style) == style

    def test_line_comment_after_brace_removed(self):
        text = "function go() {// automated handler\n  run();\n}"
        assert strip_provenance_comments(text) == "function go() {\n  run();\n}"

    def test_does_not_span_across_comments(self):
        text = "<!-- header --><h1>Title</h1><!-- Generated -->"
        assert strip_provenance_comments(text) == "<!-- header --><h1>Title</h1>"


class TestSanitizeArtifact:
    def test_fenced_document(self):
        raw = "```html\n<!DOCTYPE html>\n<html><body>Shop</body></html>\n```"
        result = sanitize_artifact(raw)
        assert result.startswith("<!DOCTYPE html>")
        assert "```" not in result

    def test_provenance_comment_removed_surroundings_preserved(self):
        raw = "<!DOCTYPE html>\n<html>\n<head><title>Shop</title></head>\n<!-- Generated by AI -->\n<body>Shop</body>\n</html>"
        result = sanitize_artifact(raw)
        assert "Generated by AI" not in result
        assert "<head><title>Shop</title></head>\n" in result
        assert "\n<body>Shop</body>\n</html>" in result

    def test_idempotent(self):
        raw = (
            "```html\n```html\n<!DOCTYPE html>\n<!-- Generated by AI -->\n"
            "<style>/* GPT theme */ body{}</style>\n<script>// automated\nrun();</script>\n```"
        )
        once = sanitize_artifact(raw)
        assert sanitize_artifact(once) == once

    def test_clean_document_unchanged(self):
        assert sanitize_artifact(PAGE) == PAGE

    def test_empty_input(self):
        assert sanitize_artifact("") == ""
        assert sanitize_artifact(None) == ""
