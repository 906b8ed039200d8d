import threading

import mako.template

'''
workaround bug in mako use lock to sequentialise invocations of mako.template.Template
see: https://github.com/sqlalchemy/mako/issues/378
'''
template_lock = threading.Lock()


def indent_func(depth):
    '''
    returns a filter that indents all but the first line of a (multi-line) text by `depth`
    spaces. Useful for continuing markdown list-items.
    '''
    return lambda text: text.replace('\n', '\n' + depth * ' ')


def render_template(template_contents: str, **kwargs) -> str:
    with template_lock:
        t = mako.template.Template(template_contents)
        return t.render(**kwargs)
