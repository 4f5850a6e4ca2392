"""Application templates: app, max and vue-app."""

from pathlib import Path

from kickstart.templates.common import (
    husky_package_fields,
    merge_package,
    write_common_files,
    write_file,
    write_json,
)


def _app_package(data: dict, deps: dict, dev_deps: dict) -> dict:
    package = {
        "private": True,
        "author": data["author"],
        "scripts": {
            "dev": "umi dev",
            "build": "umi build",
            "postinstall": "umi setup",
            "setup": "umi setup",
            "start": "npm run dev",
        },
        "dependencies": deps,
        "devDependencies": dev_deps,
    }
    return merge_package(package, husky_package_fields(data))


def _write_tsconfig(target: Path) -> None:
    write_file(target / "tsconfig.json", """{
  "extends": "./src/.umi/tsconfig.json"
}
""")
    write_file(target / "typings.d.ts", """import 'umi/typings';
""")


# =============================================================================
# app
# =============================================================================

def create_app(target: Path, data: dict) -> None:
    """Simple umi application."""
    write_json(target / "package.json", _app_package(
        data,
        deps={"umi": data["version"]},
        dev_deps={"@types/react": "^18.0.33", "@types/react-dom": "^18.0.11", "typescript": "^5.0.3"},
    ))
    write_common_files(target, data)
    _write_tsconfig(target)

    write_file(target / ".umirc.ts", f"""import {{ defineConfig }} from "umi";

export default defineConfig({{
  routes: [
    {{ path: "/", component: "index" }},
    {{ path: "/docs", component: "docs" }},
  ],
  npmClient: '{data["npmClient"]}',
}});
""")

    write_file(target / "src" / "layouts" / "index.tsx", """import { Link, Outlet } from 'umi';
import styles from './index.less';

export default function Layout() {
  return (
    <div className={styles.navs}>
      <ul>
        <li>
          <Link to="/">Home</Link>
        </li>
        <li>
          <Link to="/docs">Docs</Link>
        </li>
      </ul>
      <Outlet />
    </div>
  );
}
""")
    write_file(target / "src" / "layouts" / "index.less", """.navs {
  ul {
    padding: 0;
    list-style: none;
    display: flex;
  }
  li {
    margin-right: 1em;
  }
}
""")
    write_file(target / "src" / "pages" / "index.tsx", """export default function HomePage() {
  return (
    <div>
      <h2>Yay! Welcome to umi!</h2>
      <p>
        To get started, edit <code>pages/index.tsx</code> and save to reload.
      </p>
    </div>
  );
}
""")
    write_file(target / "src" / "pages" / "docs.tsx", """const DocsPage = () => {
  return (
    <div>
      <p>This is umi docs.</p>
    </div>
  );
};

export default DocsPage;
""")


# =============================================================================
# max
# =============================================================================

def create_max(target: Path, data: dict) -> None:
    """Ant Design Pro application on @umijs/max."""
    package = _app_package(
        data,
        deps={
            "@ant-design/icons": "^5.0.1",
            "@ant-design/pro-components": "^2.4.4",
            "@umijs/max": data["version"],
            "antd": "^5.4.0",
        },
        dev_deps={"@types/react": "^18.0.33", "@types/react-dom": "^18.0.11", "typescript": "^5.0.3"},
    )
    package["scripts"] = {
        "dev": "max dev",
        "build": "max build",
        "format": "prettier --cache --write .",
        "postinstall": "max setup",
        "setup": "max setup",
        "start": "npm run dev",
        **{k: v for k, v in package["scripts"].items() if k == "prepare"},
    }
    write_json(target / "package.json", package)
    write_common_files(target, data)

    write_file(target / "tsconfig.json", """{
  "extends": "./src/.umi/tsconfig.json"
}
""")
    write_file(target / "typings.d.ts", """import '@umijs/max/typings';
""")

    write_file(target / ".umirc.ts", f"""import {{ defineConfig }} from '@umijs/max';

export default defineConfig({{
  antd: {{}},
  access: {{}},
  model: {{}},
  initialState: {{}},
  request: {{}},
  layout: {{
    title: '@umijs/max',
  }},
  routes: [
    {{ path: '/', redirect: '/home' }},
    {{ name: 'Home', path: '/home', component: './Home' }},
    {{ name: 'Access', path: '/access', component: './Access' }},
  ],
  npmClient: '{data["npmClient"]}',
}});
""")

    write_file(target / "src" / "app.ts", """// Runtime config, https://umijs.org/docs/api/runtime-config
export async function getInitialState(): Promise<{ name: string }> {
  return { name: '@umijs/max' };
}

export const layout = () => {
  return {
    logo: 'https://img.alicdn.com/tfs/TB1YHEpwUT1gK0jSZFhXXaAtVXa-28-27.svg',
    menu: {
      locale: false,
    },
  };
};
""")
    write_file(target / "src" / "access.ts", """export default (initialState: API.UserInfo) => {
  const canSeeAdmin = !!(
    initialState && initialState.name !== 'dontHaveAccess'
  );
  return {
    canSeeAdmin,
  };
};
""")
    write_file(target / "src" / "pages" / "Home" / "index.tsx", """import { PageContainer } from '@ant-design/pro-components';
import { useModel } from '@umijs/max';

const HomePage: React.FC = () => {
  const { name } = useModel('global');
  return (
    <PageContainer ghost>
      <div>Welcome, {name}</div>
    </PageContainer>
  );
};

export default HomePage;
""")
    write_file(target / "src" / "pages" / "Access" / "index.tsx", """import { PageContainer } from '@ant-design/pro-components';
import { Access, useAccess } from '@umijs/max';
import { Button } from 'antd';

const AccessPage: React.FC = () => {
  const access = useAccess();
  return (
    <PageContainer ghost header={{ title: 'Access' }}>
      <Access accessible={access.canSeeAdmin}>
        <Button>Only admins can see this button</Button>
      </Access>
    </PageContainer>
  );
};

export default AccessPage;
""")
    write_file(target / "src" / "models" / "global.ts", """import { useState } from 'react';

const useUser = () => {
  const [name, setName] = useState<string>('Umi Max');
  return {
    name,
    setName,
  };
};

export default useUser;
""")


# =============================================================================
# vue-app
# =============================================================================

def create_vue_app(target: Path, data: dict) -> None:
    """umi application rendered with Vue."""
    write_json(target / "package.json", _app_package(
        data,
        deps={"@umijs/preset-vue": data["version"], "umi": data["version"]},
        dev_deps={"typescript": "^5.0.3"},
    ))
    write_common_files(target, data)
    _write_tsconfig(target)

    write_file(target / ".umirc.ts", f"""import {{ defineConfig }} from "umi";

export default defineConfig({{
  routes: [
    {{ path: "/", component: "index" }},
    {{ path: "/docs", component: "docs" }},
  ],
  presets: [require.resolve('@umijs/preset-vue')],
  npmClient: '{data["npmClient"]}',
}});
""")

    write_file(target / "src" / "layouts" / "index.vue", """<template>
  <div class="navs">
    <ul>
      <li><router-link to="/">Home</router-link></li>
      <li><router-link to="/docs">Docs</router-link></li>
    </ul>
    <router-view></router-view>
  </div>
</template>

<style lang="less" scoped>
.navs ul {
  padding: 0;
  list-style: none;
  display: flex;
}
.navs li {
  margin-right: 1em;
}
</style>
""")
    write_file(target / "src" / "pages" / "index.vue", """<template>
  <div>
    <h2>Yay! Welcome to umi with vue!</h2>
    <p>
      To get started, edit <code>pages/index.vue</code> and save to reload.
    </p>
  </div>
</template>
""")
    write_file(target / "src" / "pages" / "docs.vue", """<template>
  <div>
    <p>This is umi docs.</p>
  </div>
</template>
""")
