"""
Basic Usage Example
Extract comments from a fetched page and from a local HTML snippet
"""

from comment_extractor import CommentExtractor

PAGE_HTML = """
<ul class="comment-list">
  <li data-id="101"><span class="author">Alice</span><p>Great chapter!</p>
      <time datetime="2024-05-01T12:00:00Z">May 1</time></li>
  <li><span class="author">Bob</span><p>Waiting for the next one</p></li>
</ul>
"""


def main():
    extractor = CommentExtractor()

    # Local markup
    comments = extractor.extract(PAGE_HTML, unit_id='chapter-42')
    print(f"\n✅ Extracted {len(comments)} comments")
    for comment in comments:
        print(f"  [{comment.id}] {comment.author}: {comment.content}")

    # Remote page (empty list if the fetch fails)
    comments = extractor.fetch_comments('https://example.com/chapter/42', unit_id='chapter-42')
    print(f"\n✅ Fetched {len(comments)} comments")

    extractor.close()


if __name__ == '__main__':
    main()
