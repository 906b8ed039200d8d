'''
Release Notes Generator

Creates release-notes for a new release of a project from

- manually authored release-metadata (title, preface, curated notes, breaking changes)
- commits and contributors between the previous and the current release (from git)
- changes of pinned dependencies (from a `vendor.conf`-style manifest) between both releases

The result is rendered using a mako-template. Nothing is published, tagged or pushed.
'''
